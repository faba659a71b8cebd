import pytest

from json_typegen.options import ConvertOptions


@pytest.fixture()
def default_options() -> ConvertOptions:
    return ConvertOptions(
        root_name="Root",
        use_interface=True,
        optional_properties=False,
        add_export=False,
    )
