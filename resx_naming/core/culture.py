"""Culture names and culture keys."""

import re
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Union


# ISO 639-1 language codes
ISO_639_1_CODES = frozenset('''
aa ab ae af ak am an ar as av ay az ba be bg bh bi bm bn bo br bs ca ce ch co
cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy ga gd gl
gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it iu ja jv ka kg
ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln lo lt lu lv mg mh mi mk
ml mn mr ms mt my na nb nd ne ng nl nn no nr nv ny oc oj om or os pa pi pl ps
pt qu rm rn ro ru rw sa sc sd se sg si sk sl sm sn so sq sr ss st su sv sw ta
te tg th ti tk tl tn to tr ts tt tw ty ug uk ur uz ve vi vo wa wo xh yi yo za
zh zu
'''.split())

# Three-letter codes used by Windows/.NET culture names without a two-letter form
ISO_639_3_CODES = frozenset('''
arn ast ceb chr ckb dsb fil gsw haw hsb ibb kok mni moh nqo nso prs quc qut quz
sah sma smj smn sms syr tzm yue zgh
'''.split())

_CULTURE_PATTERN = re.compile(
    r'^(?P<language>[a-z]{2,3})'
    r'(?:-(?P<script>[a-z]{4}))?'
    r'(?:-(?P<region>[a-z]{2}|[0-9]{3}))?$',
    re.IGNORECASE,
)


class CultureHelper:
    """
    Decides whether a string is a culture name.

    A culture name is a locale identifier of the form
    ``language[-Script][-REGION]`` with a known language subtag, e.g.
    ``en``, ``en-US``, ``zh-Hans``, ``sr-Latn-RS`` or ``es-419``.
    Additional (custom) culture names can be registered explicitly.
    """

    def __init__(self, additional_cultures: Optional[Iterable[str]] = None):
        """
        Initialize culture helper.

        Args:
            additional_cultures: Extra culture names to accept verbatim
        """
        self.additional_cultures = frozenset(
            name.lower() for name in (additional_cultures or []) if name
        )

    def is_valid_culture_name(self, name: Optional[str]) -> bool:
        """
        Check if a string is a valid culture name (case-insensitive).

        Args:
            name: Candidate culture name

        Returns:
            True if the name denotes a specific culture
        """
        if not name or not isinstance(name, str):
            return False

        if name.lower() in self.additional_cultures:
            return True

        match = _CULTURE_PATTERN.match(name)
        if not match:
            return False

        language = match.group('language').lower()
        if len(language) == 2:
            return language in ISO_639_1_CODES
        return language in ISO_639_3_CODES

    def normalize(self, name: str) -> str:
        """
        Return the canonical casing of a culture name.

        Examples:
            'en-us'   -> 'en-US'
            'ZH-HANS' -> 'zh-Hans'

        Args:
            name: Culture name

        Returns:
            Canonical culture name; custom names are returned unchanged
        """
        match = _CULTURE_PATTERN.match(name or '')
        if not match:
            return name

        parts = [match.group('language').lower()]
        if match.group('script'):
            parts.append(match.group('script').title())
        if match.group('region'):
            parts.append(match.group('region').upper())
        return '-'.join(parts)


_default_helper = CultureHelper()


def get_default_culture_helper() -> CultureHelper:
    """Return the culture helper used when none is injected."""
    return _default_helper


def is_valid_culture_name(name: Optional[str]) -> bool:
    """Check a culture name with the default culture helper."""
    return _default_helper.is_valid_culture_name(name)


@dataclass(frozen=True, eq=False)
class CultureKey:
    """
    Identifies the culture of a resource file.

    A key is either neutral (``culture is None``, the default resource set)
    or holds a specific culture name. Keys compare case-insensitively, the
    same way culture names do.
    """
    culture: Optional[str] = None

    NEUTRAL: ClassVar['CultureKey']

    def __post_init__(self):
        # '' and None both mean neutral
        if not self.culture:
            object.__setattr__(self, 'culture', None)

    @classmethod
    def parse(cls, value: Union[str, 'CultureKey', None]) -> 'CultureKey':
        """
        Create a culture key from a culture name.

        Args:
            value: Culture name, existing key, '' or None for neutral

        Returns:
            Culture key
        """
        if isinstance(value, CultureKey):
            return value
        if not value:
            return cls.NEUTRAL
        return cls(value)

    @property
    def is_neutral(self) -> bool:
        return self.culture is None

    def __eq__(self, other) -> bool:
        if not isinstance(other, CultureKey):
            return NotImplemented
        return self._compare_key() == other._compare_key()

    def __hash__(self) -> int:
        return hash(self._compare_key())

    def __str__(self) -> str:
        return self.culture or ''

    def _compare_key(self) -> str:
        return (self.culture or '').lower()


CultureKey.NEUTRAL = CultureKey()
