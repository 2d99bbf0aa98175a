"""
Course extraction from uploaded documents (syllabus, timetable scan, ...).

Extractors implement one method:

    extract(document, notifier=None) -> list[CourseDraft]

and may report staged progress through a ProgressNotifier. The only
extractor shipped here is StubExtractor, which walks through the progress
stages and returns a fixed set of sample courses. No document content is
read.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional, Protocol

from eduplan.model import CourseDraft


ACCEPTED_MIME_TYPES = {
    "application/pdf": ".pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "application/msword": ".doc",
    "text/plain": ".txt",
    "image/png": ".png",
    "image/jpeg": ".jpg",
}

_SUFFIX_TYPES = {suffix: mime for mime, suffix in ACCEPTED_MIME_TYPES.items()}
_SUFFIX_TYPES[".jpeg"] = "image/jpeg"


class UnsupportedDocumentError(ValueError):
    """Raised for files that are not PDF, Word, plain text or PNG/JPEG."""


@dataclass(frozen=True)
class UploadedDocument:
    name: str
    mime_type: str
    data: bytes = b""

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedDocument":
        """
        Read a file and guess its MIME type from the suffix.
        """
        p = Path(path)
        mime = _SUFFIX_TYPES.get(p.suffix.lower(), "application/octet-stream")
        return cls(name=p.name, mime_type=mime, data=p.read_bytes())


class ProgressNotifier(Protocol):
    def update(self, percent: int, stage: str) -> None: ...


class Extractor(Protocol):
    def extract(
        self, document: UploadedDocument, notifier: Optional[ProgressNotifier] = None
    ) -> list[CourseDraft]: ...


# ---------------------------------------------------------------------------
# Stub
# ---------------------------------------------------------------------------

OCR_STAGE = (15, "OCR - Reconnaissance de texte")

STAGES = [
    (20, "Lecture du document"),
    (45, "Extraction des informations"),
    (70, "Identification des cours"),
    (90, "Organisation des horaires"),
    (100, "Terminé"),
]

IMAGE_STAGES = [
    (15, "Lecture du document"),
    (35, "Extraction des informations"),
    (60, "Identification des cours"),
    (85, "Organisation des horaires"),
    (100, "Terminé"),
]

SAMPLE_COURSES = (
    CourseDraft(
        title="Analyse de Données",
        professor="Prof. Lefebvre",
        location="Salle C105",
        start_time="09:00",
        end_time="11:00",
        day_of_week=2,
        color="#3b82f6",
        description="Extrait du plan de cours - Statistiques et visualisation",
        credits=4,
    ),
    CourseDraft(
        title="Intelligence Artificielle",
        professor="Dr. Zhang",
        location="Lab IA B301",
        start_time="14:00",
        end_time="17:00",
        day_of_week=3,
        color="#8b5cf6",
        description="Extrait du plan de cours - Machine Learning et réseaux neuronaux",
        credits=5,
    ),
    CourseDraft(
        title="Gestion de Projet",
        professor="Mme. Moreau",
        location="Salle D202",
        start_time="10:00",
        end_time="12:00",
        day_of_week=4,
        color="#10b981",
        description="Extrait du plan de cours - Méthodes agiles et Scrum",
        credits=3,
    ),
)


def check_document(document: UploadedDocument) -> None:
    if document.mime_type not in ACCEPTED_MIME_TYPES:
        raise UnsupportedDocumentError(
            f"Format de fichier non supporté: {document.name} ({document.mime_type}). "
            "Utilisez PDF, Word, TXT ou images (PNG, JPG)."
        )


class StubExtractor:
    """
    Fake extractor: reports progress, then returns SAMPLE_COURSES.

    `delay` seconds are slept between stages (0 by default, so tests and
    scripts run instantly).
    """

    def __init__(self, delay: float = 0.0, sleep: Callable[[float], None] = time.sleep) -> None:
        self.delay = delay
        self._sleep = sleep

    def _step(self, percent: int, stage: str, notifier: Optional[ProgressNotifier]) -> None:
        if self.delay > 0:
            self._sleep(self.delay)
        if notifier is not None:
            notifier.update(percent, stage)

    def extract(
        self, document: UploadedDocument, notifier: Optional[ProgressNotifier] = None
    ) -> list[CourseDraft]:
        check_document(document)

        stages = STAGES
        if document.is_image:
            self._step(*OCR_STAGE, notifier)
            stages = IMAGE_STAGES

        for percent, stage in stages:
            self._step(percent, stage, notifier)

        return [replace(d) for d in SAMPLE_COURSES]
