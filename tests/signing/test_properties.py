"""Tests for key.properties parsing."""

from pathlib import Path

from flavorkit.domain.signing import SigningSource
from flavorkit.signing.properties import KeyProperties, parse_properties


class TestParseProperties:
    """java.util.Properties text format."""

    def test_equals_separator(self):
        assert parse_properties("keyAlias=upload\n") == {"keyAlias": "upload"}

    def test_colon_and_whitespace_separators(self):
        text = "keyAlias: upload\nstoreFile /keys/app.jks\n"
        assert parse_properties(text) == {
            "keyAlias": "upload",
            "storeFile": "/keys/app.jks",
        }

    def test_whitespace_around_separator_is_dropped(self):
        assert parse_properties("  keyAlias   =   upload") == {"keyAlias": "upload"}

    def test_trailing_whitespace_in_value_is_kept(self):
        assert parse_properties("keyPassword=secret  ") == {"keyPassword": "secret  "}

    def test_comments_and_blank_lines_ignored(self):
        text = "# signing\n! legacy comment\n\n   \nkeyAlias=upload\n"
        assert parse_properties(text) == {"keyAlias": "upload"}

    def test_value_may_contain_separators(self):
        assert parse_properties("storeFile=C:/keys/a=b.jks") == {
            "storeFile": "C:/keys/a=b.jks"
        }

    def test_line_continuation(self):
        text = "storeFile=/very/long/\\\n    path/upload.jks\n"
        assert parse_properties(text) == {"storeFile": "/very/long/path/upload.jks"}

    def test_continued_line_starting_with_hash_is_not_comment(self):
        text = "keyPassword=abc\\\n#def\n"
        assert parse_properties(text) == {"keyPassword": "abc#def"}

    def test_escaped_backslash_does_not_continue(self):
        text = "storeFile=C:\\\\keys\\\\\nkeyAlias=upload\n"
        assert parse_properties(text) == {
            "storeFile": "C:\\keys\\",
            "keyAlias": "upload",
        }

    def test_escapes(self):
        text = "a=tab\\there\nb=\\u00e9t\\u00e9\nc=\\#not-comment\n"
        assert parse_properties(text) == {"a": "tab\there", "b": "été", "c": "#not-comment"}

    def test_escaped_separator_in_key(self):
        assert parse_properties("my\\=key=value") == {"my=key": "value"}

    def test_key_without_value(self):
        assert parse_properties("keyPassword") == {"keyPassword": ""}

    def test_later_keys_override(self):
        assert parse_properties("keyAlias=a\nkeyAlias=b\n") == {"keyAlias": "b"}

    def test_windows_line_endings(self):
        assert parse_properties("keyAlias=upload\r\nstoreFile=x.jks\r\n") == {
            "keyAlias": "upload",
            "storeFile": "x.jks",
        }

    def test_only_cr_and_lf_end_lines(self):
        """Latin-1 control characters such as NEL stay inside values."""
        assert parse_properties("storePassword=p\x85ss\x1cw\x0bd\nkeyAlias=x\n") == {
            "storePassword": "p\x85ss\x1cw\x0bd",
            "keyAlias": "x",
        }

    def test_form_feed_inside_value_is_kept(self):
        assert parse_properties("keyPassword=ab\x0ccd\nkeyAlias=x") == {
            "keyPassword": "ab\x0ccd",
            "keyAlias": "x",
        }

    def test_bare_carriage_return_ends_line(self):
        assert parse_properties("keyAlias=upload\rstoreFile=x.jks") == {
            "keyAlias": "upload",
            "storeFile": "x.jks",
        }


class TestKeyProperties:
    """Typed view over parsed properties."""

    def test_maps_recognized_keys(self):
        props = KeyProperties.from_text(
            "storePassword=sp\nkeyPassword=kp\nkeyAlias=upload\nstoreFile=u.jks\n"
        )

        assert props.store_password == "sp"
        assert props.key_password == "kp"
        assert props.key_alias == "upload"
        assert props.store_file == "u.jks"

    def test_absent_keys_are_none_and_unknown_ignored(self):
        props = KeyProperties.from_properties({"keyAlias": "upload", "flavor": "dev"})

        assert props.key_alias == "upload"
        assert props.store_file is None
        assert props.store_password is None
        assert props.key_password is None

    def test_to_signing_config(self):
        config = KeyProperties.from_properties(
            {"storeFile": "u.jks", "keyAlias": "upload"}
        ).to_signing_config()

        assert config.source == SigningSource.PROPERTIES_FILE
        assert config.store_file == Path("u.jks")
        assert config.key_alias == "upload"
        assert config.is_usable is False
        assert config.missing_fields == ["store_password", "key_password"]

    def test_escaped_blank_store_file_is_unset(self):
        props = KeyProperties.from_text("storeFile=\\ \nkeyAlias=upload\n")

        config = props.to_signing_config()

        assert config.store_file is None
        assert "store_file" in config.missing_fields
