"""
Tests for core/serializer.py - PromptSpecification XML output.
"""

import unittest
from datetime import datetime, timedelta, timezone

from xmlprompt.core.serializer import (
    escape_xml,
    format_timestamp,
    render,
    serialize,
    split_example_lines,
)
from xmlprompt.core.spec import PromptSpecification

NOW = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


def _serialize(**overrides):
    fields = dict(
        task="",
        lines=5,
        tone="neutral",
        language="English",
        additional_notes="",
        include_examples=False,
        examples="",
        now=NOW,
    )
    fields.update(overrides)
    return serialize(**fields)


class TestEscapeXml(unittest.TestCase):
    """Test cases for escape_xml."""

    def test_escapes_all_reserved_characters(self):
        self.assertEqual(
            escape_xml("a & b < c > d \" e ' f"),
            "a &amp; b &lt; c &gt; d &quot; e &apos; f",
        )

    def test_ampersand_escaped_first(self):
        """Existing entities must not be left intact or double-escaped wrongly."""
        self.assertEqual(escape_xml("&lt;"), "&amp;lt;")

    def test_other_characters_untouched(self):
        text = "héllo wörld ✓ \t/\\=;"
        self.assertEqual(escape_xml(text), text)

    def test_non_string_values(self):
        self.assertEqual(escape_xml(5), "5")
        self.assertEqual(escape_xml(-3), "-3")
        self.assertEqual(escape_xml(2.5), "2.5")


class TestFormatTimestamp(unittest.TestCase):

    def test_utc_with_milliseconds_and_z(self):
        self.assertEqual(format_timestamp(NOW), "2025-01-02T03:04:05.678Z")

    def test_converts_other_timezones_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        local = datetime(2025, 1, 2, 5, 4, 5, 678000, tzinfo=plus_two)
        self.assertEqual(format_timestamp(local), "2025-01-02T03:04:05.678Z")

    def test_naive_datetime_treated_as_utc(self):
        self.assertEqual(
            format_timestamp(datetime(2025, 1, 2, 3, 4, 5)),
            "2025-01-02T03:04:05.000Z",
        )


class TestSplitExampleLines(unittest.TestCase):

    def test_unix_and_windows_line_breaks(self):
        self.assertEqual(split_example_lines("a\nb\r\nc"), ["a", "b", "c"])

    def test_blank_lines_kept(self):
        self.assertEqual(split_example_lines("A\nB\n\nC"), ["A", "B", "", "C"])

    def test_empty_text_is_one_empty_line(self):
        self.assertEqual(split_example_lines(""), [""])


class TestSerialize(unittest.TestCase):
    """Test cases for the document structure."""

    def test_full_document_layout(self):
        xml = _serialize(
            task="Write a greeting",
            lines=3,
            tone="friendly",
            language="Spanish",
            additional_notes="keep it short",
            include_examples=True,
            examples="Hola\nBuenos días",
        )
        expected = "\n".join([
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<PromptSpecification generatedAt="2025-01-02T03:04:05.678Z">',
            "  <Task>Write a greeting</Task>",
            "  <Lines>3</Lines>",
            "  <Tone>friendly</Tone>",
            "  <Language>Spanish</Language>",
            "  <Examples>",
            "    <Example>Hola</Example>",
            "    <Example>Buenos días</Example>",
            "  </Examples>",
            "  <AdditionalNotes>keep it short</AdditionalNotes>",
            "</PromptSpecification>",
        ])
        self.assertEqual(xml, expected)

    def test_literal_scenario(self):
        xml = _serialize(
            task="Write a <formal> email",
            lines=5,
            tone="formal",
            language="French",
            additional_notes="avoid slang",
        )
        self.assertIn("<Task>Write a &lt;formal&gt; email</Task>", xml)
        self.assertNotIn("<Examples>", xml)
        self.assertIn("  <Language>French</Language>\n  <AdditionalNotes>avoid slang</AdditionalNotes>", xml)

    def test_no_blank_line_when_examples_omitted(self):
        xml = _serialize(include_examples=False, examples="ignored\ntext")
        self.assertNotIn("\n\n", xml)
        self.assertNotIn("Example", xml)
        self.assertNotIn("ignored", xml)

    def test_example_lines_in_order_with_blank(self):
        xml = _serialize(include_examples=True, examples="A\nB\n\nC")
        self.assertEqual(xml.count("<Example>"), 4)
        self.assertIn(
            "    <Example>A</Example>\n"
            "    <Example>B</Example>\n"
            "    <Example></Example>\n"
            "    <Example>C</Example>",
            xml,
        )

    def test_each_example_escaped(self):
        xml = _serialize(include_examples=True, examples="a<b\r\n\"q\" & 'p'")
        self.assertIn("<Example>a&lt;b</Example>", xml)
        self.assertIn("<Example>&quot;q&quot; &amp; &apos;p&apos;</Example>", xml)

    def test_no_raw_reserved_characters_in_text_nodes(self):
        nasty = "& < > \" '"
        xml = _serialize(
            task=nasty,
            tone=nasty,
            language=nasty,
            additional_notes=nasty,
            include_examples=True,
            examples=nasty,
        )
        escaped = "&amp; &lt; &gt; &quot; &apos;"
        for tag in ("Task", "Tone", "Language", "Example", "AdditionalNotes"):
            self.assertIn(f"<{tag}>{escaped}</{tag}>", xml)
        self.assertNotIn(nasty, xml)

    def test_deterministic_for_fixed_timestamp(self):
        first = _serialize(task="t", include_examples=True, examples="x")
        second = _serialize(task="t", include_examples=True, examples="x")
        self.assertEqual(first, second)

    def test_timestamp_reflects_injected_value(self):
        later = NOW + timedelta(seconds=1)
        xml = _serialize(now=later)
        self.assertIn('generatedAt="2025-01-02T03:04:06.678Z"', xml)

    def test_non_numeric_and_negative_lines(self):
        self.assertIn("<Lines>-4</Lines>", _serialize(lines=-4))
        self.assertIn("<Lines>abc &amp; more</Lines>", _serialize(lines="abc & more"))
        self.assertIn("<Lines>2.5</Lines>", _serialize(lines=2.5))

    def test_no_trailing_newline(self):
        self.assertTrue(_serialize().endswith("</PromptSpecification>"))

    def test_render_uses_record_fields(self):
        spec = PromptSpecification(
            task="T", lines=7, tone="technical", language="German",
            additional_notes="N", include_examples=True, examples="E",
        )
        self.assertEqual(
            render(spec, NOW),
            _serialize(
                task="T", lines=7, tone="technical", language="German",
                additional_notes="N", include_examples=True, examples="E",
            ),
        )


if __name__ == "__main__":
    unittest.main()
