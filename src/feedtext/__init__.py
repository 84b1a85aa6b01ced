"""feedtext — Lenient decoding of XML text content found in syndication feeds.

Decodes character/entity references, isolates CDATA sections, extracts element
text via lxml, and splits "Name (address)" author strings.
"""

__version__ = "0.3.0"
