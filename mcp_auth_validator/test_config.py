"""
Unit tests for loading validator options from files.
"""

import os
import shutil
import tempfile
import unittest

from mcp_auth_validator.authentication.exceptions import InvalidArgumentError
from mcp_auth_validator.authentication.validators.authentication import (
    AuthenticationValidator,
)
from mcp_auth_validator.config import (
    FileOptionsLoader,
    create_validator,
    load_validator_options,
)


class TestFileOptionsLoader(unittest.TestCase):
    """Test cases for the FileOptionsLoader class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def create_options_file(self, content, name="options"):
        """Helper method to create a temporary options file."""
        file_path = os.path.join(self.temp_dir, name)
        with open(file_path, "w") as f:
            f.write(content)
        return f"file://{file_path}"

    def test_url_must_be_file(self):
        """Test that only file:// urls are accepted."""
        with self.assertRaises(RuntimeError):
            FileOptionsLoader("https://example.org/options.json")

    def test_missing_file(self):
        """Test that a missing file is reported as a RuntimeError."""
        url = f"file://{os.path.join(self.temp_dir, 'missing.json')}"
        with self.assertRaisesRegex(RuntimeError, "Failed to fetch options"):
            FileOptionsLoader(url).load()

    def test_load_json(self):
        """Test loading JSON options, with string code map keys."""
        url = self.create_options_file(
            '{"identity": "username", "code_map": {"-999": "custom_error"},'
            ' "messages": {"custom_error": "Custom Error"}}'
        )
        options = load_validator_options(url)
        self.assertEqual(options["identity"], "username")
        self.assertEqual(options["code_map"], {-999: "custom_error"})
        self.assertEqual(options["messages"], {"custom_error": "Custom Error"})

    def test_load_yaml(self):
        """Test loading YAML options."""
        url = self.create_options_file(
            """
identity: username
credential: password
code_map:
  -4: identity_not_found
  -999: custom_error
messages:
  custom_error: Custom Error
"""
        )
        options = load_validator_options(url)
        self.assertEqual(options["credential"], "password")
        self.assertEqual(
            options["code_map"], {-4: "identity_not_found", -999: "custom_error"}
        )

    def test_load_empty_file(self):
        """Test that an empty file yields no options."""
        self.assertEqual(load_validator_options(self.create_options_file("")), {})

    def test_invalid_yaml(self):
        """Test that unparsable content is reported."""
        url = self.create_options_file("identity: [unclosed")
        with self.assertRaisesRegex(RuntimeError, "YAML parsing failed"):
            load_validator_options(url)

    def test_options_must_be_mapping(self):
        """Test that a document other than a mapping is rejected."""
        url = self.create_options_file("- identity\n- credential\n")
        with self.assertRaises(RuntimeError):
            load_validator_options(url)

    def test_create_validator(self):
        """Test building a validator from a file plus overrides."""
        url = self.create_options_file(
            '{"identity": "username", "code_map": {"-999": "custom_error"}}'
        )
        validator = create_validator(url, credential="password")
        self.assertIsInstance(validator, AuthenticationValidator)
        self.assertEqual(validator.get_identity(), "username")
        self.assertEqual(validator.get_credential(), "password")
        self.assertEqual(validator.get_code_map()[-999], "custom_error")
        self.assertEqual(
            validator.get_message_templates()["custom_error"], "Authentication failed"
        )

    def test_non_integer_code_map_keys(self):
        """Test that code map keys which are not integers are rejected."""
        url = self.create_options_file('{"code_map": {"oops": "custom_error"}}')
        with self.assertRaisesRegex(
            InvalidArgumentError, "Result code in code_map option must be an integer"
        ):
            load_validator_options(url)

    def test_create_validator_with_bad_code_map(self):
        """Test that malformed code maps in files are rejected."""
        url = self.create_options_file('{"code_map": {"-999": ""}}')
        with self.assertRaises(InvalidArgumentError):
            create_validator(url)


if __name__ == "__main__":
    unittest.main()
