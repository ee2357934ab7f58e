"""Group catalog records into model families by base name."""

from __future__ import annotations

from typing import Iterable

from .models._types import GroupedModel, ModelRecord
from .models.parser import base_model_name


def group_models_by_base_name(models: Iterable[ModelRecord]) -> list[GroupedModel]:
    """Cluster *models* by base name, preserving first-seen order.

    Groups appear in the order their base name was first encountered and
    members keep their input order. The group's shared fields are copied
    from its first member, so catalog order decides which variant's
    metadata represents the family.
    """
    groups: dict[str, list[ModelRecord]] = {}
    for model in models:
        groups.setdefault(base_model_name(model.name), []).append(model)

    result: list[GroupedModel] = []
    for base_name, members in groups.items():
        first = members[0]
        result.append(
            GroupedModel(
                base_name=base_name,
                display_name=first.display_name,
                family=first.family,
                models=tuple(members),
                benchmark_score=first.benchmark_score,
                size_category=first.size_category,
                file_size=first.file_size,
            )
        )
    return result
