"""Exam-topic lookups and study tips built on passage search."""

import logging

from ..domain import Passage, SearchResult, TopicMatch, TopicSearch
from .retrieval_service import RetrievalService
from .tokenizer import fold_case

logger = logging.getLogger(__name__)

TOPIC_QUERY_PREFIX = "TYT AYT"
TOPIC_MAX_RESULTS = 10
TOPIC_MIN_SCORE = 0.2
EXAM_MARKERS = ("tyt", "ayt", "sınav")

STUDY_TIPS_QUERY = "çalışma tekniği motivasyon verimlilik"
STUDY_TIPS_CATEGORY = "health-study"
STUDY_TIPS_MAX_RESULTS = 5
STUDY_TIPS_MIN_SCORE = 0.3

GENERAL = "Genel"

# (label, keywords matched in the body, keywords matched in the title)
SUBJECT_RULES = (
    ("Matematik", ("matematik",), ("matematik",)),
    ("Türkçe", ("türkçe",), ("türkçe",)),
    ("Fen Bilimleri", ("fen", "fizik", "kimya", "biyoloji"), ()),
    ("Sosyal Bilimler", ("sosyal", "tarih", "coğrafya", "felsefe"), ()),
    ("İngilizce", ("ingilizce",), ("ingilizce",)),
    ("Python", ("python",), ("python",)),
)

LEVEL_RULES = (
    ("TYT", ("tyt",), ("tyt",)),
    ("AYT", ("ayt",), ("ayt",)),
    ("Başlangıç", ("başlangıç", "temel"), ()),
    ("Orta", ("orta", "intermediate"), ()),
    ("İleri", ("ileri", "advanced"), ()),
)


def _classify(passage: Passage, rules) -> str:
    content = fold_case(passage.content)
    title = fold_case(passage.title)
    for label, content_keywords, title_keywords in rules:
        if any(k in content for k in content_keywords) or any(k in title for k in title_keywords):
            return label
    return GENERAL


def extract_subject(passage: Passage) -> str:
    """Exam subject a passage covers, by substring rules; ``Genel`` if none apply.

    Rules are checked in order, so a passage mentioning both ``matematik``
    and ``fizik`` is labelled ``Matematik``.
    """
    return _classify(passage, SUBJECT_RULES)


def extract_level(passage: Passage) -> str:
    """Exam level (TYT, AYT) or difficulty a passage is written for."""
    return _classify(passage, LEVEL_RULES)


def mentions_exam(passage: Passage) -> bool:
    content = fold_case(passage.content)
    title = fold_case(passage.title)
    return any(marker in content for marker in EXAM_MARKERS) or any(
        marker in title for marker in ("tyt", "ayt")
    )


class TopicService:
    """Canned searches for exam preparation on top of RetrievalService."""

    def __init__(self, retrieval: RetrievalService) -> None:
        self.retrieval = retrieval

    def tyt_ayt(
        self,
        subject: str | None = None,
        level: str | None = None,
        max_results: int = TOPIC_MAX_RESULTS,
        min_score: float = TOPIC_MIN_SCORE,
    ) -> TopicSearch:
        """Search exam material, optionally narrowed by subject and level.

        The query is ``TYT AYT`` followed by the subject and level. Results
        that never mention the exams are dropped and the rest are labelled
        with their subject and level.

        Args:
            subject: Free-text subject such as ``matematik``.
            level: Free-text level such as ``ayt``.
            max_results: Results fetched before exam filtering.
            min_score: Similarity threshold for the search.
        """
        query = " ".join(part for part in (TOPIC_QUERY_PREFIX, subject, level) if part)
        results = self.retrieval.search(query, max_results=max_results, min_score=min_score)

        matches = [
            TopicMatch(
                result=result,
                subject=extract_subject(result.passage),
                level=extract_level(result.passage),
            )
            for result in results
            if mentions_exam(result.passage)
        ]
        logger.debug(f"Topic search {query!r}: {len(matches)} of {len(results)} result(s) kept")
        return TopicSearch(query=query, subject=subject, level=level, matches=matches)

    def study_tips(
        self,
        max_results: int = STUDY_TIPS_MAX_RESULTS,
        min_score: float = STUDY_TIPS_MIN_SCORE,
    ) -> list[SearchResult]:
        """Study technique and motivation passages from the health-study category."""
        return self.retrieval.search(
            STUDY_TIPS_QUERY,
            category=STUDY_TIPS_CATEGORY,
            max_results=max_results,
            min_score=min_score,
        )
