"""Core text decoding shared by every feed format."""

from feedtext.core.cdata import CDATA_END, CDATA_START, strip_cdata
from feedtext.core.entities import PREDEFINED_ENTITIES, decode_entities
from feedtext.core.names import parse_name_address
from feedtext.core.text import parse_text, text_type
