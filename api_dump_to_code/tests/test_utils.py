import pytest

from api_dump_to_code.utils import escape_xml_doc, make_safe_identifier


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Name", "Name"),
        ("Is Active", "IsActive"),
        ("3DMode", "_3DMode"),
        ("Mode-Flag", "Mode_Flag"),
        ("a.b", "a_b"),
        ("event", "@event"),
        ("string", "@string"),
        ("Event", "Event"),
        ("_private", "_private"),
        ("", "_"),
        ("   ", "_"),
        ("-", "_"),
    ],
)
def test_make_safe_identifier(name, expected):
    assert make_safe_identifier(name) == expected


def test_escape_xml_doc():
    assert escape_xml_doc("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"
    assert escape_xml_doc(None) == ""
    assert escape_xml_doc("") == ""
