import xml.etree.ElementTree as ET

from svd_encoder.core.element import Element, new_node


def test_new_element_is_empty():
    elem = Element("register")
    assert elem.tag == "register"
    assert elem.attributes == {}
    assert elem.children == []
    assert elem.text is None


def test_append_preserves_order():
    elem = Element("register")
    elem.append(new_node("name", "CTRL"))
    elem.append("raw")
    elem.append(new_node("addressOffset", "0x0"))

    assert elem.child_tags() == ["name", "addressOffset"]
    assert elem.children[1] == "raw"


def test_new_node_holds_text():
    node = new_node("name", "CTRL")
    assert node.children == ["CTRL"]
    assert node.text == "CTRL"


def test_set_replaces_attribute():
    elem = Element("register")
    elem.set("derivedFrom", "A")
    elem.set("derivedFrom", "B")
    assert elem.attributes == {"derivedFrom": "B"}


def test_merge_other_wins_and_children_appended():
    base = Element("register", attributes={"a": "1", "b": "1"})
    base.append(new_node("dim", "4"))

    other = Element("dimElement", attributes={"b": "2", "c": "2"})
    other.append(new_node("name", "X"))

    base.merge(other)

    assert base.tag == "register"
    assert base.attributes == {"a": "1", "b": "2", "c": "2"}
    assert base.child_tags() == ["dim", "name"]


def test_find_and_findall():
    elem = Element("fields")
    elem.append(new_node("field", "a"))
    elem.append(new_node("field", "b"))

    assert elem.find("field").text == "a"
    assert elem.find("missing") is None
    assert [f.text for f in elem.findall("field")] == ["a", "b"]


def test_to_etree_keeps_structure():
    elem = Element("register", attributes={"derivedFrom": "TIMER0"})
    elem.append(new_node("name", "CTRL"))
    fields = Element("fields")
    fields.append(new_node("field", "EN"))
    elem.append(fields)

    node = elem.to_etree()

    assert node.tag == "register"
    assert node.get("derivedFrom") == "TIMER0"
    assert node.find("name").text == "CTRL"
    assert node.find("fields/field").text == "EN"
    assert b"<name>CTRL</name>" in ET.tostring(node)


def test_to_etree_mixed_text_order():
    elem = Element("p")
    elem.append("head")
    elem.append(new_node("b", "x"))
    elem.append("tail")

    assert ET.tostring(elem.to_etree()) == b"<p>head<b>x</b>tail</p>"
