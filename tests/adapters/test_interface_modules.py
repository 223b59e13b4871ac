"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in (
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ):
        assert import_module(name).__all__ == []


def test_streamlit_app_exposes_entry_point() -> None:
    module = import_module("src.adapters.interface.streamlit.app")
    assert callable(module.main)
