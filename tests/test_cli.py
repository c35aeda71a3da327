import unittest

from rawhttp.__main__ import parse_args
from rawhttp.config import ServerConfig


class TestParseArgs(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(parse_args([]), ServerConfig())

    def test_directory_and_network(self) -> None:
        config = parse_args(["--directory", "/tmp/files", "--port", "8080",
                             "--host", "0.0.0.0", "--timeout", "5"])
        self.assertEqual(config.directory, "/tmp/files")
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.host, "0.0.0.0")
        self.assertEqual(config.connection_timeout, 5)

    def test_log_level(self) -> None:
        self.assertEqual(parse_args(["-l", "DEBUG"]).log_level, "DEBUG")
        with self.assertRaises(SystemExit):
            parse_args(["--log-level", "LOUD"])


if __name__ == "__main__":
    unittest.main()
