"""
Textes multilingues.

Les noms (articles, bassins) sont stockes sous forme de mapping
langue -> texte. Un seul point de resolution pour toute l'application.
"""

from typing import Mapping, Optional, Sequence

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "hi", "ta")


def localize(
    mapping: Optional[Mapping[str, str]],
    language: str,
    fallback: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Retourne le texte dans la langue demandee.

    Ordre de resolution: langue demandee, puis langue de repli,
    sinon chaine vide.

    Args:
        mapping: Dictionnaire {code_langue: texte}.
        language: Code langue demande (ex: "ta").
        fallback: Code langue de repli.

    Returns:
        Texte resolu.

    Example:
        >>> localize({"en": "Fish Feed", "ta": "மீன் தீவனம்"}, "hi")
        'Fish Feed'
    """
    if not mapping:
        return ""
    if isinstance(mapping, str):
        return mapping
    return mapping.get(language) or mapping.get(fallback) or ""


def resolve_language(
    accept_language: Optional[str],
    supported: Sequence[str] = SUPPORTED_LANGUAGES,
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Choisit la langue depuis un header Accept-Language.

    Les ponderations (q=) sont ignorees: l'ordre du header fait foi.

    Args:
        accept_language: Valeur brute du header (ex: "ta-IN,ta;q=0.9,en").
        supported: Langues supportees.
        default: Langue si aucune ne correspond.

    Returns:
        Code langue supporte.
    """
    if not accept_language:
        return default

    for part in accept_language.split(","):
        tag = part.split(";")[0].strip().lower()
        if tag in supported:
            return tag
        primary = tag.split("-")[0]
        if primary in supported:
            return primary

    return default


def validate_multilingual(mapping: object) -> bool:
    """True si le mapping est un dict non vide de textes."""
    if not isinstance(mapping, Mapping) or not mapping:
        return False
    return all(
        isinstance(k, str) and isinstance(v, str)
        for k, v in mapping.items()
    )
