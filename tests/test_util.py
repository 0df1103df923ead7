import unittest

from regionspan.util import format_latency, parse_latency, to_latency_string


class TestParseLatency(unittest.TestCase):

    def test_milliseconds(self):
        self.assertEqual(10.5, parse_latency('10.5 ms'))
        self.assertEqual(85.3, parse_latency('85.3ms'))

    def test_microseconds(self):
        self.assertEqual(90.0, parse_latency('90000 us'))
        self.assertEqual(500 / 1000, parse_latency('500 us'))
        self.assertEqual(1.5, parse_latency('1500us'))

    def test_bare_number(self):
        self.assertEqual(42.0, parse_latency('42'))
        self.assertEqual(12.25, parse_latency(' 12.25 '))
        self.assertEqual(7.0, parse_latency(7))
        self.assertEqual(3.5, parse_latency(3.5))

    def test_leading_number_with_unknown_unit(self):
        self.assertEqual(12.0, parse_latency('12 sec'))

    def test_invalid(self):
        self.assertIsNone(parse_latency(''))
        self.assertIsNone(parse_latency('abc'))
        self.assertIsNone(parse_latency(None))
        self.assertIsNone(parse_latency('ms'))
        self.assertIsNone(parse_latency('. ms'))
        self.assertIsNone(parse_latency(True))
        self.assertIsNone(parse_latency(['10 ms']))

    def test_non_finite(self):
        self.assertIsNone(parse_latency(float('nan')))
        self.assertIsNone(parse_latency(float('inf')))
        self.assertIsNone(parse_latency('Infinity'))

    def test_sign_before_unit_is_ignored(self):
        self.assertEqual(5.0, parse_latency('-5 ms'))
        self.assertEqual(0.5, parse_latency('+500 us'))

    def test_zero_is_known(self):
        self.assertEqual(0.0, parse_latency(0))
        self.assertEqual(0.0, parse_latency('0 ms'))


class TestFormatting(unittest.TestCase):

    def test_to_latency_string(self):
        self.assertEqual('85.3 ms', to_latency_string(85.3))
        self.assertEqual('12.35 ms', to_latency_string(12.345678))
        self.assertEqual('90 ms', to_latency_string(90.0))

    def test_to_latency_string_parses_back(self):
        self.assertEqual(55.67, parse_latency(to_latency_string(55.67)))

    def test_format_latency(self):
        self.assertEqual('87.65 ms', format_latency(87.65))
        self.assertEqual('90.00 ms', format_latency(90))
        self.assertEqual('90.0', format_latency(90, suffix='', precision=1))

    def test_format_unknown(self):
        self.assertEqual('N/A', format_latency(None))
