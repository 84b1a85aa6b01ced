"""Tests for feedtext.extract — whole-document extraction."""

import json

import pytest
from lxml import etree

from feedtext.config import ExtractConfig
from feedtext.extract import extract_feed, extract_string
from feedtext.models import Person


class TestRssExtraction:
    def test_text_fields(self, rss_file):
        result = extract_feed(rss_file)
        texts = {f.path: f.text for f in result.fields}
        assert texts == {
            "rss/channel/title": "Fish & Chips Weekly",
            "rss/channel/description": "<p>All about <b>chips</b> & fish</p>",
            "rss/channel/item/title": "Salt &amp; vinegar",
            "rss/channel/item/description": "Price < $5",
        }

    def test_people(self, rss_file):
        result = extract_feed(rss_file)
        assert result.people == [
            Person("rss/channel/managingEditor", "managingEditor", "Jane Editor", "editor@example.com"),
            Person("rss/channel/item/author", "author", "John Doe", "john@example.com"),
            Person("rss/channel/item/creator", "creator", "Ann Writer", ""),
        ]

    def test_source_name(self, rss_file):
        assert extract_feed(rss_file).source == rss_file

    def test_no_errors(self, rss_file):
        assert extract_feed(rss_file).errors == []


class TestAtomExtraction:
    def test_text_fields_and_types(self, atom_xml):
        result = extract_string(atom_xml)
        by_path = {f.path: f for f in result.fields}
        assert list(by_path) == ["feed/title", "feed/subtitle", "feed/entry/title", "feed/entry/content"]
        assert by_path["feed/title"].text == "Example & Co"
        assert by_path["feed/subtitle"].type == "html"
        assert by_path["feed/subtitle"].text == "<em>news</em>"
        assert by_path["feed/entry/content"].type == "xhtml"
        assert "Hi & bye" in by_path["feed/entry/content"].text

    def test_person_constructs(self, atom_xml):
        result = extract_string(atom_xml)
        assert [(p.path, p.name, p.address) for p in result.people] == [
            ("feed/author", "Jane Roe", "jane@example.com"),
            ("feed/entry/author", "Bob", ""),
        ]

    def test_uri_only_author_skipped(self):
        xml = (
            '<feed xmlns="http://www.w3.org/2005/Atom"><entry>'
            "<author><uri>http://example.com/bob</uri></author>"
            "</entry></feed>"
        )
        assert extract_string(xml).people == []

    def test_email_only_author(self):
        xml = (
            '<feed xmlns="http://www.w3.org/2005/Atom">'
            "<author><uri>http://example.com/</uri><email>bob@example.com</email></author>"
            "</feed>"
        )
        assert [(p.name, p.address) for p in extract_string(xml).people] == [("", "bob@example.com")]

    def test_source_is_string_marker(self, atom_xml):
        assert extract_string(atom_xml).source == "<string>"


class TestConfigDriven:
    def test_only_configured_fields(self, rss_xml):
        config = ExtractConfig(text_fields=["title"], person_fields=[])
        result = extract_string(rss_xml, config)
        assert [f.tag for f in result.fields] == ["title", "title"]
        assert result.people == []

    def test_unrecognized_person_skipped(self):
        xml = "<rss><channel><author>(nobody)</author></channel></rss>"
        assert extract_string(xml).people == []

    def test_malformed_document_raises(self):
        with pytest.raises(etree.XMLSyntaxError):
            extract_string("<rss><channel><title>x</channel>")


class TestDecodeErrors:
    def test_error_recorded_not_raised(self):
        # Entities declared in an internal subset stay unexpanded references
        xml = (
            '<!DOCTYPE rss [<!ENTITY nbsp "x">]>'
            "<rss><channel><title>a&nbsp;b</title><description>ok &amp; fine</description></channel></rss>"
        )
        result = extract_string(xml)

        failed = [f for f in result.fields if f.error]
        assert [f.path for f in failed] == ["rss/channel/title"]
        assert failed[0].text == ""
        assert failed[0].error == "unknown predefined entity &nbsp;"
        assert result.errors == failed
        # The rest of the document is still extracted
        assert [f.text for f in result.fields if not f.error] == ["ok & fine"]


class TestSerialization:
    def test_to_dict_is_json_serializable(self, rss_xml):
        data = extract_string(rss_xml).to_dict()
        decoded = json.loads(json.dumps(data))
        assert decoded["source"] == "<string>"
        assert decoded["fields"][0] == {
            "path": "rss/channel/title",
            "tag": "title",
            "type": "text",
            "text": "Fish & Chips Weekly",
            "error": "",
        }
        assert decoded["people"][0]["address"] == "editor@example.com"
