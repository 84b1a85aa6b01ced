"""Shared test fixtures for feedtext tests."""

import pytest

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Fish &amp; Chips Weekly</title>
    <description><![CDATA[<p>All about <b>chips</b> & fish</p>]]></description>
    <managingEditor>editor@example.com (Jane Editor)</managingEditor>
    <item>
      <title>Salt &amp;amp; vinegar</title>
      <author>John Doe (john@example.com)</author>
      <dc:creator>Ann Writer</dc:creator>
      <description>Price &lt; &#36;5</description>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="text">Example &amp; Co</title>
  <subtitle type="html">&lt;em&gt;news&lt;/em&gt;</subtitle>
  <author>
    <name>Jane Roe</name>
    <email>jane@example.com</email>
  </author>
  <entry>
    <title>First</title>
    <author><name>Bob</name></author>
    <content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml">Hi &amp; bye</div></content>
  </entry>
</feed>
"""


@pytest.fixture
def rss_xml():
    return RSS_FEED


@pytest.fixture
def atom_xml():
    return ATOM_FEED


@pytest.fixture
def rss_file(tmp_path):
    """Write the sample RSS 2.0 feed to a temporary file."""
    path = tmp_path / "feed.rss"
    path.write_text(RSS_FEED, encoding="utf-8")
    return str(path)


@pytest.fixture
def atom_file(tmp_path):
    """Write the sample Atom 1.0 feed to a temporary file."""
    path = tmp_path / "feed.atom"
    path.write_text(ATOM_FEED, encoding="utf-8")
    return str(path)


class RawMarkup:
    """Stand-in element exposing only raw inner markup."""

    def __init__(self, markup: str):
        self.markup = markup

    def inner_xml(self) -> str:
        return self.markup


@pytest.fixture
def markup_source():
    return RawMarkup
