"""File and JSON overlay applied on top of the generated project."""

from vitecraft.overlay.files import append_file, write_all, write_file
from vitecraft.overlay.json_merge import set_if_absent, union_list, upsert_json

__all__ = [
    "append_file",
    "set_if_absent",
    "union_list",
    "upsert_json",
    "write_all",
    "write_file",
]
