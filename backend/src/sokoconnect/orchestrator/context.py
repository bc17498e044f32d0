from typing import Optional

from sokoconnect.models import DomainSnapshot
from .state import SLOT_NAMES, AdvisorContext, Slots


def merge_context(extracted: Slots, context: Optional[AdvisorContext]) -> Slots:
    """Le contexte l'emporte sur l'extraction quand sa valeur est non vide."""
    if context is None:
        return extracted
    merged = {}
    for name in SLOT_NAMES:
        value = getattr(context, name)
        merged[name] = value if value else getattr(extracted, name)
    return Slots(**merged)


def scope_snapshot(snapshot: DomainSnapshot, context: Optional[AdvisorContext]) -> DomainSnapshot:
    """
    Substitue les sous-ensembles pré-filtrés du contexte aux collections
    complètes. Retourne une copie ; le snapshot d'origine n'est pas touché.
    """
    if context is None:
        return snapshot
    update = {}
    if context.markets is not None:
        update["markets"] = context.markets
    if context.warehouses is not None:
        update["warehouses"] = context.warehouses
    if not update:
        return snapshot
    return snapshot.model_copy(update=update)
