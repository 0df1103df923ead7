import argparse
import logging
import random
import sys

from regionspan import synthetic
from regionspan.classify import classify_rtt
from regionspan.fetch import api
from regionspan.load import load_dataset
from regionspan.regions import display_name
from regionspan.selection import Selection
from regionspan.stats import summarize
from regionspan.util import format_latency


def print_stats(dataset):
    stats = summarize(dataset)
    print('regions:    ', stats.regions)
    print('connections:', stats.connections)
    print('avg latency:', format_latency(stats.avg_latency))


def print_peers(dataset, selection: Selection):
    peers = selection.peers(dataset)

    if not peers:
        print('no measurements available for', display_name(selection.region))
        return

    print()
    print('latencies from', display_name(selection.region))
    for peer in peers:
        rtt = peer.roundtrip
        print('  %-24s %12s RTT (%s)' % (display_name(peer.destination), format_latency(rtt), classify_rtt(rtt).name))
        print('  %-24s avg: %s | fwd: %s | rev: %s | %d measurements (%d + %d)' % (
            '', format_latency(peer.avg_latency), format_latency(peer.forward_latency),
            format_latency(peer.reverse_latency), peer.total_count, peer.forward_count, peer.reverse_count))


def main():
    parser = argparse.ArgumentParser(description='Summarize latencies between cloud regions')
    parser.add_argument('region', nargs='?', help='source region to list the latencies of, e.g. westeurope')
    parser.add_argument('--url', type=str, default=api.resource, help='base url of the latency API')
    parser.add_argument('--synthetic', action='store_true', help='use synthetic data instead of the API')
    parser.add_argument('--seed', type=int, help='random seed for synthetic data')
    parser.add_argument('-v', '--verbose', action='store_true', default=False, help='enable debug logging')
    args = parser.parse_args(sys.argv[1:])

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    rnd = random.Random(args.seed) if args.seed is not None else None
    if args.synthetic:
        dataset = synthetic.generate(rnd=rnd)
    else:
        dataset = load_dataset(lambda: api.fetch(args.url), rnd=rnd)

    print_stats(dataset)

    if args.region:
        selection = Selection()
        selection.select(args.region)
        print_peers(dataset, selection)


if __name__ == '__main__':
    main()
