"""
Dérivation et contrôle de format des clés de projet

Fonctions pures : aucune dépendance vers le store.
"""

import re
from typing import List, Optional

from unidecode import unidecode

from domain.entities.project_key import (
    MIN_KEY_LENGTH, MAX_KEY_LENGTH, KeyErrorReason
)
from domain.errors import ProjectKeyError

MAX_INITIALS = 10
FALLBACK_LENGTH = 3

_NON_TOKEN_CHARS = re.compile(r"[^A-Za-z0-9\s]")
_KEY_CHARS = re.compile(r"[A-Z0-9]+")


def normalize_name(name: Optional[str]) -> List[str]:
    """
    Découpe un nom de projet en tokens alphanumériques.

    Le nom est translittéré en ASCII ("Éclair" -> "Eclair", "Łódź" -> "Lodz",
    "Straße" -> "Strasse"), la ponctuation est supprimée sans couper le mot
    ("Fiesta-Lama" -> "FiestaLama"), puis le texte est découpé sur les espaces.
    """
    if not name:
        return []
    return _NON_TOKEN_CHARS.sub("", unidecode(name)).split()


def derive_key(tokens: List[str]) -> str:
    """
    Produit la clé de base à partir des tokens d'un nom.

    - 2 tokens ou plus : initiales des 10 premiers tokens ("Fiesta Lama" -> "FL")
    - sinon : 3 premiers caractères du texte ("Acme" -> "ACM")

    Le résultat peut faire moins de 2 caractères ("A" -> "A") : c'est la
    validation qui le refuse ensuite.
    """
    if not tokens:
        raise ProjectKeyError(KeyErrorReason.EMPTY_NAME)

    if len(tokens) >= 2:
        initials = "".join(token[0] for token in tokens[:MAX_INITIALS]).upper()
        if len(initials) >= MIN_KEY_LENGTH:
            return initials[:MAX_KEY_LENGTH]

    return "".join(tokens)[:FALLBACK_LENGTH].upper()[:MAX_KEY_LENGTH]


def derive_key_from_name(name: Optional[str]) -> str:
    """Raccourci normalize_name + derive_key"""
    return derive_key(normalize_name(name))


def canonicalize_key(key: str) -> str:
    """
    Forme canonique d'une clé saisie : sans espaces autour, en majuscules.

    Seul l'ASCII est passé en majuscules : "ß".upper() donne "SS" et "ı".upper()
    donne "I". Une saisie non ASCII est rendue telle quelle et le contrôle de
    format la refuse ensuite.
    """
    entered = key.strip()
    if not entered.isascii():
        return entered
    return entered.upper()


def check_key_format(key: str) -> Optional[KeyErrorReason]:
    """
    Contrôle longueur puis format d'une clé canonique.

    Retourne le premier motif de refus, ou None si la clé est bien formée.
    """
    if len(key) < MIN_KEY_LENGTH:
        return KeyErrorReason.TOO_SHORT
    if len(key) > MAX_KEY_LENGTH:
        return KeyErrorReason.TOO_LONG
    if not _KEY_CHARS.fullmatch(key):
        return KeyErrorReason.BAD_FORMAT
    return None


def suffixed_key(base: str, suffix: int) -> Optional[str]:
    """
    Ajoute un suffixe numérique en tronquant la base pour rester dans
    MAX_KEY_LENGTH. Retourne None s'il ne reste plus aucun caractère de base.
    """
    digits = str(suffix)
    room = MAX_KEY_LENGTH - len(digits)
    if room < 1:
        return None
    return base[:room] + digits
