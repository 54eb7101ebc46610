"""Language descriptor models, codec, and checks."""

from langpack.descriptor.codec import (
    descriptor_to_dict,
    dump_descriptor,
    load_descriptor,
    parse_descriptor,
    write_descriptor,
)
from langpack.descriptor.models import BracketRule, IndentRule, LanguageDescriptor
from langpack.descriptor.validation import check_descriptor, check_file

__all__ = [
    "BracketRule",
    "IndentRule",
    "LanguageDescriptor",
    "check_descriptor",
    "check_file",
    "descriptor_to_dict",
    "dump_descriptor",
    "load_descriptor",
    "parse_descriptor",
    "write_descriptor",
]
