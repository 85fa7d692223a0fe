"""Unit tests for the channel list resolver."""

import unittest

from slack_notify.channels import resolve_channels


class TestResolveChannels(unittest.TestCase):
    """Test splitting of the raw channel setting."""

    def test_single_channel(self):
        """A value without commas is a single channel, unchanged."""
        self.assertEqual(resolve_channels("#general"), ["#general"])

    def test_single_channel_not_trimmed(self):
        self.assertEqual(resolve_channels("  #general "), ["  #general "])

    def test_comma_separated_in_order(self):
        self.assertEqual(resolve_channels("a,b,c"), ["a", "b", "c"])

    def test_tokens_not_trimmed(self):
        self.assertEqual(resolve_channels("#a, #b ,#c"), ["#a", " #b ", "#c"])

    def test_duplicates_preserved(self):
        self.assertEqual(resolve_channels("#a,#b,#a"), ["#a", "#b", "#a"])

    def test_empty_tokens_preserved(self):
        """Empty tokens are not filtered out."""
        self.assertEqual(resolve_channels("#a,,#b"), ["#a", "", "#b"])
        self.assertEqual(resolve_channels("#a,"), ["#a", ""])

    def test_empty_string(self):
        self.assertEqual(resolve_channels(""), [""])

    def test_none_treated_as_empty(self):
        self.assertEqual(resolve_channels(None), [""])

    def test_never_empty(self):
        for raw in ["", ",", "x", "x,y", " , "]:
            self.assertGreaterEqual(len(resolve_channels(raw)), 1, raw)


if __name__ == "__main__":
    unittest.main()
