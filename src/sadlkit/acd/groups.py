# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Functional classification of ACD datatype tags."""

from __future__ import annotations

from enum import Enum
from typing import Final


class ParameterGroup(str, Enum):
    """Enumerate the functional groups an ACD datatype belongs to."""

    SIMPLE = "simple"
    INPUT = "input"
    LIST = "list"
    OUTPUT = "output"
    GRAPHICS = "graphics"
    UNKNOWN = "unknown"


_GROUP_MEMBERS: Final[dict[ParameterGroup, frozenset[str]]] = {
    ParameterGroup.SIMPLE: frozenset(
        {"array", "boolean", "float", "integer", "range", "string", "toggle"},
    ),
    ParameterGroup.INPUT: frozenset(
        {
            "codon",
            "cpdb",
            "datafile",
            "directory",
            "dirlist",
            "discretestates",
            "distances",
            "features",
            "filelist",
            "frequencies",
            "infile",
            "matrix",
            "matrixf",
            "pattern",
            "properties",
            "regexp",
            "scop",
            "seqall",
            "seqset",
            "seqsetall",
            "sequence",
            "tree",
        },
    ),
    ParameterGroup.LIST: frozenset({"list", "selection"}),
    ParameterGroup.OUTPUT: frozenset(
        {
            "align",
            "featout",
            "outcodon",
            "outcpdb",
            "outdata",
            "outdir",
            "outdiscrete",
            "outdistance",
            "outfile",
            "outfreq",
            "outmatrix",
            "outmatrixf",
            "outproperties",
            "outscop",
            "outtree",
            "report",
            "seqout",
            "seqoutall",
            "seqoutset",
        },
    ),
    ParameterGroup.GRAPHICS: frozenset({"graph", "xygraph"}),
}

_TAG_TO_GROUP: Final[dict[str, ParameterGroup]] = {
    tag: group for group, members in _GROUP_MEMBERS.items() for tag in members
}


def detect_parameter_group(type_tag: str) -> ParameterGroup:
    """Return the functional group for ``type_tag``.

    Args:
        type_tag: ACD datatype name; matched case-insensitively.

    Returns:
        ParameterGroup: Group of the datatype, ``UNKNOWN`` when unrecognised.
    """

    return _TAG_TO_GROUP.get(type_tag.lower(), ParameterGroup.UNKNOWN)


__all__ = ["ParameterGroup", "detect_parameter_group"]
