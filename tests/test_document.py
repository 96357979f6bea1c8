import pytest

from plainyaml.document import YamlDocument, split_lines
from plainyaml.line import YamlParseError
from plainyaml.node import QuoteStyle, YamlError

SAMPLE = (
    "# comment\n"
    "name: value\n"
    "map:\n"
    '  key: "quoted" # note\n'
    "list:\n"
    "  - one\n"
    "  - two\n"
)

ARRAY_OF_MAPS = (
    "items:\n"
    "  - name: first\n"
    "    size: 1\n"
    "  - name: second\n"
)


def _load(text, name="test.yml"):
    doc = YamlDocument()
    doc.load_string(name, text)
    return doc


def test_split_lines_drops_trailing_newline():
    assert split_lines("a\nb\n") == ["a", "b"]


def test_split_lines_keeps_inner_blank_lines():
    assert split_lines("a\n\nb") == ["a", "", "b"]


def test_split_lines_empty_text():
    assert split_lines("") == []


def test_round_trip_sample():
    assert _load(SAMPLE).dump() == SAMPLE


def test_round_trip_array_of_maps():
    assert _load(ARRAY_OF_MAPS).dump() == ARRAY_OF_MAPS


def test_round_trip_blank_line():
    text = "a: 1\n\nb: 2\n"
    assert _load(text).dump() == text


def test_round_trip_quoted_key_and_empty_quoted_value():
    text = '"my key": value\nempty: ""\n'
    doc = _load(text)
    assert doc.dump() == text
    assert doc.root.get_element("my key").name_quotes is QuoteStyle.DOUBLE
    assert doc["empty"].val_str() == ""


def test_values_read_through_cursor():
    doc = _load(SAMPLE)
    assert doc["name"].val_str() == "value"
    assert doc["map"]["key"].val_str() == "quoted"
    assert doc["map"]["key"].comment == "note"
    assert doc["list"].size() == 2
    assert doc["list"][1].val_str() == "two"
    assert doc.cursor().keys() == ["name", "map", "list"]


def test_array_of_maps_structure():
    doc = _load(ARRAY_OF_MAPS)
    items = doc["items"]
    assert items.is_array()
    assert items.size() == 2
    assert items[0]["name"].val_str() == "first"
    assert items[0]["size"].val_int() == 1
    assert items[1]["name"].val_str() == "second"
    assert items[1].has_key("size") is False


def test_missing_key_gives_null_cursor():
    doc = _load(SAMPLE)
    assert doc["absent"].is_null()
    assert doc["list"][5].is_null()


def test_place_of_node_is_recorded():
    doc = _load(SAMPLE, name="conf.yml")
    place = doc["name"].node.place
    assert place.filename == "conf.yml"
    assert place.line_number == 1
    assert place.line == "name: value"


def test_unterminated_string_raises():
    with pytest.raises(YamlParseError):
        _load('a: "abc\n')


def test_duplicate_key_raises():
    with pytest.raises(YamlError):
        _load("a: 1\na: 2\n")


def test_wrong_indent_raises():
    with pytest.raises(YamlParseError):
        _load("a:\n    b: 1\n  c: 2\n")


def test_failed_load_keeps_previous_content():
    doc = _load("a: 1\n")
    with pytest.raises(YamlError):
        doc.load_string("bad", "a: 1\na: 2\n")
    assert doc.dump() == "a: 1\n"


def test_load_replaces_previous_content():
    doc = _load("a: 1\n")
    doc.load_string("second", "b: 2\n")
    assert doc.cursor().keys() == ["b"]


def test_clear_leaves_empty_document():
    doc = _load(SAMPLE)
    doc.clear()
    assert doc.cursor().keys() == []
    assert doc.dump() == "\n"


def test_build_programmatically_and_reload():
    doc = YamlDocument()
    doc.root.set_element_value("name", "value")
    doc.root.create_element_array("list")
    doc.root.get_element("list").append_element_value("x")
    text = doc.dump()
    assert text == "name: value\nlist:\n  - x\n"
    assert _load(text).dump() == text


def test_cursor_update_is_dumped():
    doc = _load("flag: no\ncount: 3\n")
    assert doc["flag"].val_bool() is False
    doc["flag"].set_val(True)
    doc["count"].set_val(7)
    reloaded = _load(doc.dump())
    assert reloaded["flag"].val_bool() is True
    assert reloaded["count"].val_int() == 7


def test_save_and_load_file(tmp_path):
    path = tmp_path / "out.yml"
    _load(SAMPLE).save_file(path)
    assert path.read_text(encoding="utf-8") == SAMPLE
    doc = YamlDocument()
    doc.load_file(path)
    assert doc.dump() == SAMPLE
    assert doc["name"].node.place.filename == str(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlDocument().load_file(tmp_path / "missing.yml")