"""Data model for feed classification and post extraction."""

import hashlib
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ItemKind(Enum):
    """What a feed entry turned out to be for one classification call."""

    PLACEHOLDER = "placeholder"
    COMMENT = "comment"
    GENUINE = "genuine"


@dataclass(frozen=True)
class Provenance:
    """Which strategy produced a field value."""

    field: str
    strategy: str
    rank: int  # 1-based position in the strategy list


@dataclass
class AuthorInfo:
    """Author fields extracted from a single post node."""

    name: Optional[str] = None
    profile_url: Optional[str] = None
    photo_url: Optional[str] = None
    provenance: Optional[Provenance] = None
    # Every name seen, as (strategy, name); diagnostic only
    candidates: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class IdentifierInfo:
    """Permalinks and the canonical post id chosen from them."""

    permalink_candidates: List[str] = field(default_factory=list)
    canonical_id: Optional[str] = None
    # Every id seen, as (source, id) in precedence order; diagnostic only
    id_candidates: List[Tuple[str, str]] = field(default_factory=list)
    provenance: Optional[Provenance] = None


@dataclass
class PostRecord:
    """A normalized post extracted from a genuine feed item."""

    body_text: str
    canonical_id: Optional[str] = None
    author_name: Optional[str] = None
    author_profile_url: Optional[str] = None
    author_photo_url: Optional[str] = None
    permalink_candidates: List[str] = field(default_factory=list)
    has_see_more: bool = False
    provenance: Dict[str, Provenance] = field(default_factory=dict)

    @property
    def content_hash(self) -> str:
        """Deterministic hash of body text and author link."""
        content = f"{self.body_text}|{self.author_profile_url or ''}"
        return hashlib.sha256(content.encode("utf-8")).hexdigest()[:32]

    @property
    def record_key(self) -> str:
        """Canonical id when known, otherwise a content hash key."""
        if self.canonical_id:
            return self.canonical_id
        return f"hash_{self.content_hash}"

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        data = asdict(self)
        data["provenance"] = {
            name: {"strategy": p.strategy, "rank": p.rank}
            for name, p in self.provenance.items()
        }
        data["record_key"] = self.record_key
        return data


@dataclass
class TickCounts:
    """Classification counts for one snapshot of the feed."""

    genuine: int = 0
    placeholder: int = 0
    comment: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.genuine + self.placeholder + self.comment + self.skipped

    def add(self, kind: Optional[ItemKind]) -> None:
        """Count one classified node; None means the node was skipped."""
        if kind is ItemKind.GENUINE:
            self.genuine += 1
        elif kind is ItemKind.COMMENT:
            self.comment += 1
        elif kind is ItemKind.PLACEHOLDER:
            self.placeholder += 1
        else:
            self.skipped += 1

    def summary(self) -> str:
        return (
            f"{self.genuine} genuine / {self.comment} comments / "
            f"{self.placeholder} placeholders / {self.skipped} skipped / "
            f"{self.total} total"
        )


@dataclass
class ReadinessResult:
    """Outcome of one readiness cycle."""

    converged: bool
    genuine_count: int
    attempts: int
    last_counts: Optional[TickCounts] = None


@dataclass
class ScanResult:
    """Records extracted from a feed plus how ready the feed was."""

    records: List[PostRecord]
    readiness: ReadinessResult
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "converged": self.readiness.converged,
            "genuine_count": self.readiness.genuine_count,
            "attempts": self.readiness.attempts,
            "records": [record.to_dict() for record in self.records],
        }
