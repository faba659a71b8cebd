from json_typegen.descriptors import ArrayOf, Reference, Scalar
from json_typegen.generator import Declaration, DeclarationRegistry, Property, generate_declaration
from json_typegen.options import ConvertOptions
from json_typegen.values import JsonObject, from_python


def _object(data: dict) -> JsonObject:
    value = from_python(data)
    assert isinstance(value, JsonObject)
    return value


def test_nested_records_register_before_parent(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    generate_declaration(
        _object({"user": {"profile": {"name": "John"}}, "tags": [{"id": 1}]}),
        "Root",
        default_options,
        registry,
    )
    assert registry.names() == ["Profile", "User", "TagsItem", "Root"]


def test_property_types(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    root = generate_declaration(
        _object(
            {
                "id": 7,
                "note": None,
                "empty": [],
                "scores": [1, 2.5],
                "mixed": [1, "a", 2],
                "owner": {"name": "x"},
                "items": [{"sku": "a"}, {"other": 1}],
            }
        ),
        "Root",
        default_options,
        registry,
    )
    lines = [prop.render() for prop in root.properties]
    assert lines == [
        "  id: number;",
        "  note: null;",
        "  empty: unknown[];",
        "  scores: number[];",
        "  mixed: (number | string)[];",
        "  owner: Owner;",
        "  items: ItemsItem[];",
    ]


def test_array_of_objects_uses_first_element_shape(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    generate_declaration(
        _object({"items": [{"sku": "a"}, {"other": 1}]}), "Root", default_options, registry
    )
    item = registry.get("ItemsItem")
    assert item is not None
    assert [prop.raw_key for prop in item.properties] == ["sku"]


def test_root_property_references(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    root = generate_declaration(
        _object({"owner": {"a": 1}, "rows": [{"b": 2}]}), "Root", default_options, registry
    )
    assert root.properties[0].type == Reference("Owner")
    assert root.properties[1].type == ArrayOf(Reference("RowsItem"))
    assert registry.get("Root") is root


def test_colliding_names_keep_last_write(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    generate_declaration(
        _object({"a": {"value": {"first": 1}}, "b": {"value": {"second": "x"}}}),
        "Root",
        default_options,
        registry,
    )
    value = registry.get("Value")
    assert value is not None
    assert [prop.raw_key for prop in value.properties] == ["second"]
    assert len(registry) == 4


def test_record_rendering_forms(default_options: ConvertOptions) -> None:
    declaration = Declaration(
        name="User",
        kind="record",
        properties=(Property("name", "name", Scalar("string")),),
    )
    assert declaration.render(default_options) == "interface User {\n  name: string;\n}"
    alias_options = default_options.model_copy(update={"use_interface": False, "add_export": True})
    assert declaration.render(alias_options) == "export type User = {\n  name: string;\n};"


def test_empty_object_renders_blank_body(default_options: ConvertOptions) -> None:
    registry = DeclarationRegistry()
    root = generate_declaration(_object({}), "Root", default_options, registry)
    assert root.render(default_options) == "interface Root {\n\n}"


def test_alias_rendering(default_options: ConvertOptions) -> None:
    alias = Declaration.alias("Root", ArrayOf(Reference("RootItem")))
    assert alias.kind == "alias"
    assert alias.properties[0].raw_key == "value"
    assert alias.render(default_options) == "type Root = RootItem[];"


def test_optional_marker(default_options: ConvertOptions) -> None:
    options = default_options.model_copy(update={"optional_properties": True})
    registry = DeclarationRegistry()
    root = generate_declaration(_object({"my-key": 1, "ok": "x"}), "Root", options, registry)
    assert root.render(options) == 'interface Root {\n  "my-key"?: number;\n  ok?: string;\n}'
