"""Data models for XEM API responses."""

from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictInt, StrictStr, model_validator

ANIDB = 'anidb'
SCENE = 'scene'
TVDB = 'tvdb'

ORIGINS = frozenset({ANIDB, SCENE, TVDB})

SUCCESS = 'success'

T = TypeVar('T')


class Episode(BaseModel):
    """Episode numbering, including both season and absolute episode numbers."""

    model_config = ConfigDict(frozen=True)

    season: StrictInt = 0
    episode: StrictInt = 0
    absolute: StrictInt = 0

    @model_validator(mode='before')
    @classmethod
    def _nulls_as_zero(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


def _null_episodes(raw: Any) -> Any:
    """A null mapping or a null episode inside one decodes as empty."""
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return {origin: {} if episode is None else episode for origin, episode in raw.items()}
    return raw


# Origin name -> Episode
Mapping = Dict[str, Episode]
Mappings = List[Annotated[Mapping, BeforeValidator(_null_episodes)]]


class AlternateName(BaseModel):
    """One alternate name of a show and the season it applies to."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    season: StrictInt = 0


def _flatten_names(raw: Any) -> Any:
    """Turns ``{"<show>": [{"<alternate name>": <season>}, ...]}`` into AlternateName input.

    Every key of an entry becomes one AlternateName, in order. Anything that
    is not of that shape is passed on untouched so validation reports it.
    """
    if not isinstance(raw, dict):
        return raw
    names = {}
    for show, entries in raw.items():
        if entries is None:
            names[show] = []
            continue
        if not isinstance(entries, list):
            names[show] = entries
            continue
        alternates = []
        for entry in entries:
            if entry is None:
                continue
            if not isinstance(entry, dict):
                alternates.append(entry)
                continue
            alternates.extend(
                {'name': name, 'season': 0 if season is None else season}
                for name, season in entry.items()
            )
        names[show] = alternates
    return names


Names = Annotated[Dict[str, List[AlternateName]], BeforeValidator(_flatten_names)]


class Envelope(BaseModel, Generic[T]):
    """Outer object of every XEM response.

    ``data`` is only validated when ``result`` is "success"; for any other
    result it is discarded and ``message`` carries the detail.
    """

    result: StrictStr = ''
    data: Optional[T] = None
    message: StrictStr = ''

    @model_validator(mode='before')
    @classmethod
    def _discard_failed_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {key: value for key, value in data.items() if value is not None}
        if data.get('result') != SUCCESS:
            data.pop('data', None)
        return data

    @property
    def ok(self) -> bool:
        return self.result == SUCCESS


AllEnvelope = Envelope[Mappings]
NamesEnvelope = Envelope[Names]
