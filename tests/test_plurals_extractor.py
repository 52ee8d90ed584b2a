#!/usr/bin/env python3
"""
Tests for converting <plurals> resources into a stringsdict property list.
"""
import plistlib
import unittest

from resconvert.extraction.plurals_extractor import PluralsExtractor
from resconvert.models.conversion_result import Diagnostics
from resconvert.models.resource_entry import PluralItem


EMPTY_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
    <dict>
    </dict>
</plist>"""


class TestPluralsExtractor(unittest.TestCase):

    def setUp(self):
        self.extractor = PluralsExtractor()

    def parse_plist(self, output):
        return plistlib.loads(output.encode("utf-8"))

    def test_num_items(self):
        """Items are emitted in source order inside the COUNT dictionary"""
        source = ('<plurals name="num_items"><item quantity="one">1 item</item>'
                  '<item quantity="other">%d items</item></plurals>')
        result = self.extractor.extract(source)

        lines = [line.strip() for line in result.output.split("\n")]
        self.assertIn("<key>num_items</key>", lines)
        one = lines.index("<key>one</key>")
        other = lines.index("<key>other</key>")
        self.assertEqual(lines[one + 1], "<string>1 item</string>")
        self.assertEqual(lines[other + 1], "<string>%d items</string>")
        self.assertLess(one, other)

        group = result.entries[0]
        self.assertEqual(group.name, "num_items")
        self.assertEqual(group.quantities, ["one", "other"])

    def test_full_document_layout(self):
        source = """<resources>
    <plurals name="days_left">
        <item quantity="one">%d day left</item>
        <item quantity="other">%d days left</item>
    </plurals>
</resources>"""
        expected = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
    <dict>
        <key>days_left</key>
        <dict>
            <key>NSStringLocalizedFormatKey</key>
            <string>%#@COUNT@</string>
            <key>COUNT</key>
            <dict>
                <key>NSStringFormatSpecTypeKey</key>
                <string>NSStringPluralRuleType</string>
                <key>NSStringFormatValueTypeKey</key>
                <string>d</string>
                <key>one</key>
                <string>%d day left</string>
                <key>other</key>
                <string>%d days left</string>
            </dict>
        </dict>
    </dict>
</plist>"""
        result = self.extractor.extract(source)
        self.assertEqual(result.output, expected)

    def test_output_is_a_valid_property_list(self):
        source = """<resources>
    <plurals name="songs">
        <item quantity="one">%d song</item>
        <item quantity="other">%d songs</item>
    </plurals>
    <plurals name="albums">
        <item quantity="other">%d albums</item>
    </plurals>
</resources>"""
        data = self.parse_plist(self.extractor.extract(source).output)

        self.assertEqual(list(data.keys()), ["songs", "albums"])
        self.assertEqual(data["songs"]["NSStringLocalizedFormatKey"], "%#@COUNT@")
        self.assertEqual(data["songs"]["COUNT"], {
            "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
            "NSStringFormatValueTypeKey": "d",
            "one": "%d song",
            "other": "%d songs",
        })
        self.assertEqual(data["albums"]["COUNT"]["other"], "%d albums")

    def test_no_plurals(self):
        result = self.extractor.extract('<resources><string name="a">A</string></resources>')
        self.assertEqual(result.output, EMPTY_DOCUMENT)
        self.assertEqual(result.entries, [])

    def test_group_without_items_keeps_shell(self):
        """A group whose items all fail to parse still emits the rule dictionary"""
        source = """<plurals name="broken">
    <item>no quantity</item>
    <item quantity="">empty quantity</item>
</plurals>"""
        result = self.extractor.extract(source)

        self.assertEqual(len(result.entries), 1)
        self.assertEqual(result.entries[0].items, [])
        data = self.parse_plist(result.output)
        self.assertEqual(data["broken"]["COUNT"], {
            "NSStringFormatSpecTypeKey": "NSStringPluralRuleType",
            "NSStringFormatValueTypeKey": "d",
        })
        # Items are dropped without diagnostics
        self.assertEqual(len(result.diagnostics), 0)

    def test_invalid_item_does_not_affect_siblings(self):
        source = """<plurals name="files">
    <item quantity="one">%d file</item>
    <item>%d broken</item>
    <item quantity="other">%d files</item>
</plurals>"""
        result = self.extractor.extract(source)
        self.assertEqual(result.entries[0].quantities, ["one", "other"])

    def test_group_without_name_is_skipped(self):
        source = """<plurals>
    <item quantity="other">%d nameless</item>
</plurals>
<plurals name="named">
    <item quantity="other">%d named</item>
</plurals>"""
        diagnostics = Diagnostics()
        result = self.extractor.extract(source, diagnostics)

        self.assertEqual([g.name for g in result.entries], ["named"])
        self.assertNotIn("nameless", result.output)
        self.assertEqual(len(diagnostics.for_stage("plurals")), 1)
        self.assertEqual(diagnostics.records[0].offset, 0)

    def test_comment_above_item(self):
        """A comment directly before an item is rendered above its key"""
        source = """<plurals name="messages">
    <!-- Shown in the inbox header -->
    <item quantity="one">%d message</item>
    <item quantity="other">%d messages</item>
</plurals>"""
        result = self.extractor.extract(source)

        lines = result.output.split("\n")
        comment = lines.index("                <!-- Shown in the inbox header -->")
        self.assertEqual(lines[comment + 1], "                <key>one</key>")
        self.assertEqual(
            result.entries[0].items[0],
            PluralItem(quantity="one", value="%d message", comment="Shown in the inbox header"),
        )
        self.assertIsNone(result.entries[0].items[1].comment)

    def test_multiline_comment_is_trimmed(self):
        """Blank comment lines are dropped and the rest trimmed"""
        source = """<plurals name="photos">
    <item quantity="one">%d photo</item>
    <!--
        Used for the gallery title.

        Keep it short.
    -->
    <item quantity="other">%d photos</item>
</plurals>"""
        result = self.extractor.extract(source)
        item = result.entries[0].items[1]
        self.assertEqual(item.comment, "Used for the gallery title.\nKeep it short.")
        self.assertIn("<!-- Used for the gallery title.\nKeep it short. -->", result.output)
        # Still a well formed property list
        self.assertEqual(self.parse_plist(result.output)["photos"]["COUNT"]["other"], "%d photos")

    def test_comment_only_attaches_to_next_item(self):
        source = """<plurals name="points">
    <!-- Unrelated note -->
    <!-- Singular form -->
    <item quantity="one">%d point</item>
</plurals>"""
        result = self.extractor.extract(source)
        self.assertEqual(result.entries[0].items[0].comment, "Singular form")
        self.assertNotIn("Unrelated note", result.output)

    def test_commented_out_item_is_ignored(self):
        """An item inside an XML comment is not converted"""
        source = """<plurals name="results">
    <item quantity="other">%d results</item>
    <!-- <item quantity="zero">No results</item> -->
</plurals>"""
        result = self.extractor.extract(source)
        self.assertEqual(result.entries[0].quantities, ["other"])
        self.assertNotIn("<key>zero</key>", result.output)

    def test_commented_out_item_before_live_item(self):
        source = """<plurals name="results">
    <!-- <item quantity="zero">No results</item> -->
    <item quantity="other">%d results</item>
</plurals>"""
        result = self.extractor.extract(source)
        self.assertEqual(result.entries[0].quantities, ["other"])

    def test_blank_comment_is_not_rendered(self):
        source = '<plurals name="x"><!--   --><item quantity="other">%d</item></plurals>'
        result = self.extractor.extract(source)
        self.assertIsNone(result.entries[0].items[0].comment)
        self.assertNotIn("<!--", result.output)

    def test_items_are_scoped_to_their_group(self):
        source = """<plurals name="first">
    <item quantity="other">%d first</item>
</plurals>
<item quantity="one">stray</item>
<plurals name="second">
    <item quantity="other">%d second</item>
</plurals>"""
        result = self.extractor.extract(source)
        self.assertEqual([g.name for g in result.entries], ["first", "second"])
        self.assertEqual(result.entries[0].quantities, ["other"])
        self.assertEqual(result.entries[1].quantities, ["other"])
        self.assertNotIn("stray", result.output)

    def test_case_insensitive_tags(self):
        source = '<PLURALS NAME="caps"><ITEM QUANTITY="other">%d caps</ITEM></PLURALS>'
        result = self.extractor.extract(source)
        self.assertEqual(result.entries[0].name, "caps")
        self.assertEqual(result.entries[0].quantities, ["other"])

    def test_value_is_carried_verbatim(self):
        source = '<plurals name="x"><item quantity="other">%1$d &amp; <b>more</b></item></plurals>'
        result = self.extractor.extract(source)
        self.assertIn("<string>%1$d &amp; <b>more</b></string>", result.output)

    def test_format_value_type(self):
        extractor = PluralsExtractor(format_value_type="ld")
        result = extractor.extract('<plurals name="x"><item quantity="other">%ld</item></plurals>')
        self.assertEqual(
            self.parse_plist(result.output)["x"]["COUNT"]["NSStringFormatValueTypeKey"], "ld"
        )


if __name__ == '__main__':
    unittest.main()
