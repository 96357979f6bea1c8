import pytest

from plainyaml.cursor import Cursor
from plainyaml.node import NodeType, PlaceInFile, YamlError, YamlNode


@pytest.fixture
def root():
    root = YamlNode(None, PlaceInFile(), NodeType.MAP)
    root.set_element_value("name", "demo")
    root.set_element_value("count", "42")
    root.set_element_value("negative", "-7")
    root.set_element_value("enabled", "Yes")
    root.set_element_value("disabled", "FALSE")
    root.create_element_array("items")
    items = root.get_element("items")
    items.append_element_value("first")
    items.append_element_value("second")
    root.create_element_map("nested")
    root.get_element("nested").set_element_value("inner", "deep")
    return root


def test_null_cursor_defaults():
    cursor = Cursor(None)
    assert cursor.is_null()
    assert not cursor.is_map()
    assert not cursor.is_array()
    assert not cursor.is_value()
    assert not cursor.is_undefined()
    assert cursor.size() == -1
    assert cursor.keys() == []
    assert cursor.has_key("x") is False
    assert cursor.val_str() == ""
    assert cursor.val_int() == 0
    assert cursor.val_bool() is False
    assert cursor.comment == ""


def test_null_cursor_chaining_stays_null():
    cursor = Cursor(None)
    assert cursor["a"][0]["b"].is_null()


def test_set_on_null_cursor_returns_self():
    cursor = Cursor(None)
    assert cursor.set_val("x") is cursor
    assert cursor.set_comment("c") is cursor
    assert cursor.comment == ""


def test_map_keys_and_lookup(root):
    cursor = Cursor(root)
    assert cursor.is_map()
    assert cursor.keys() == root.keys()
    assert cursor.has_key("name")
    assert not cursor.has_key("missing")
    assert cursor["name"].val_str() == "demo"
    assert cursor["nested"]["inner"].val_str() == "deep"
    assert cursor["missing"].is_null()


def test_array_access(root):
    items = Cursor(root)["items"]
    assert items.is_array()
    assert items.size() == 2
    assert items[0].val_str() == "first"
    assert items[1].val_str() == "second"
    assert items[2].is_null()
    assert items[-1].is_null()


def test_index_on_map_and_key_on_array_are_null(root):
    cursor = Cursor(root)
    assert cursor[0].is_null()
    assert cursor["items"]["first"].is_null()


def test_size_of_non_array(root):
    assert Cursor(root)["name"].size() == -1
    assert Cursor(root).size() == -1


def test_keys_of_non_map(root):
    assert Cursor(root)["items"].keys() == []


def test_val_int(root):
    cursor = Cursor(root)
    assert cursor["count"].val_int() == 42
    assert cursor["negative"].val_int() == -7


@pytest.mark.parametrize("text", ["abc", "12abc", "+5", "007", " 5", "-0", "99999999999"])
def test_val_int_rejects(text):
    node = YamlNode(None, PlaceInFile(), NodeType.MAP)
    node.set_element_value("n", text)
    with pytest.raises(YamlError):
        Cursor(node)["n"].val_int()


def test_val_bool(root):
    cursor = Cursor(root)
    assert cursor["enabled"].val_bool() is True
    assert cursor["disabled"].val_bool() is False


def test_val_bool_rejects(root):
    with pytest.raises(YamlError):
        Cursor(root)["name"].val_bool()


def test_val_str_on_container_raises(root):
    with pytest.raises(YamlError):
        Cursor(root)["nested"].val_str()


def test_set_val_string_roundtrip(root):
    cursor = Cursor(root)
    result = cursor["name"].set_val("changed")
    assert result.val_str() == "changed"
    assert root.get_element("name").value == "changed"


def test_set_val_int_roundtrip(root):
    cursor = Cursor(root)
    cursor["count"].set_val(-123)
    assert cursor["count"].val_int() == -123


def test_set_val_bool_uses_yes_no(root):
    cursor = Cursor(root)
    cursor["enabled"].set_val(False)
    assert cursor["enabled"].val_str() == "no"
    cursor["enabled"].set_val(True)
    assert cursor["enabled"].val_str() == "yes"
    assert cursor["enabled"].val_bool() is True


def test_set_val_on_container_raises(root):
    with pytest.raises(YamlError):
        Cursor(root)["items"].set_val("x")


def test_comment_roundtrip(root):
    cursor = Cursor(root)["name"]
    cursor.set_comment("note")
    assert cursor.comment == "note"
    assert root.get_element("name").comment == "note"


def test_node_property(root):
    cursor = Cursor(root)["nested"]
    assert cursor.node is root.get_element("nested")
    assert Cursor().node is None


def test_undefined_node():
    node = YamlNode(None, PlaceInFile(), NodeType.UNDEFINED)
    cursor = Cursor(node)
    assert cursor.is_undefined()
    assert not cursor.is_null()
    assert cursor["x"].is_null()
    assert cursor[0].is_null()