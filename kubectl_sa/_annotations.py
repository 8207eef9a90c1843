# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import copy
import json

from kr8s.asyncio.objects import APIObject

from ._exceptions import AnnotationEncodingFailure

LAST_APPLIED_CONFIG_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"


def get_modified_configuration(obj: APIObject) -> str:
    """Encode the object as it would be recorded in the last-applied annotation.

    The annotation itself is left out of the encoding so that recording it
    repeatedly produces the same value.
    """
    raw = copy.deepcopy(obj.raw.to_dict())
    annotations = raw.get("metadata", {}).get("annotations")
    if annotations is not None:
        annotations.pop(LAST_APPLIED_CONFIG_ANNOTATION, None)
        if not annotations:
            del raw["metadata"]["annotations"]
    try:
        return json.dumps(raw, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise AnnotationEncodingFailure(
            f"unable to encode {LAST_APPLIED_CONFIG_ANNOTATION}: {e}"
        ) from e


def create_or_update_annotation(create_annotation: bool, obj: APIObject) -> None:
    """Record the last-applied-configuration annotation on ``obj`` when requested."""
    if not create_annotation:
        return
    modified = get_modified_configuration(obj)
    if "annotations" not in obj.raw["metadata"]:
        obj.raw["metadata"]["annotations"] = {}
    obj.raw["metadata"]["annotations"][LAST_APPLIED_CONFIG_ANNOTATION] = modified
