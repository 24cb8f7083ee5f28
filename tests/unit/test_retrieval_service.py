"""Unit tests for passage search and highlighting."""

import pytest

from studyrag.core.domain.exceptions import (
    EmptyQueryError,
    InvalidSearchOptionsError,
    NotInitializedError,
    QueryTooLongError,
    ValidationError,
)
from studyrag.core.services import KnowledgeBase, PassageIndex, RetrievalService, bootstrap_index
from studyrag.core.services.retrieval_service import find_highlights, search

pytestmark = pytest.mark.unit


class TestSearchValidation:
    """Tests for rejected queries."""

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_empty_query_raises(self, sample_index, query):
        with pytest.raises(EmptyQueryError):
            search(sample_index, query)

    def test_empty_query_is_validation_error(self, sample_index):
        with pytest.raises(ValidationError):
            search(sample_index, "")

    def test_query_too_long_raises(self, sample_index):
        with pytest.raises(QueryTooLongError):
            search(sample_index, "derivative " * 20, max_query_length=50)

    def test_max_results_below_one_raises(self, sample_index):
        with pytest.raises(InvalidSearchOptionsError):
            search(sample_index, "derivative", max_results=0)

    def test_uninitialized_index_raises(self, derivatives_document):
        index = PassageIndex()
        index.ingest(derivatives_document)
        with pytest.raises(NotInitializedError):
            search(index, "derivative")

    def test_validation_precedes_initialization_check(self):
        with pytest.raises(EmptyQueryError):
            search(PassageIndex(), "")


class TestSearchRanking:
    """Tests for scoring, filtering and ordering."""

    def test_derivative_query_in_math_category(self, sample_index):
        results = search(sample_index, "derivative", category="math")

        assert results
        assert all(r.passage.category == "math" for r in results)
        assert all(r.score > 0.1 for r in results)

    def test_turkish_query_against_seed(self, seed_index):
        results = search(seed_index, "türev")

        assert results
        assert results[0].passage.category == "ayt-matematik"
        assert results[0].score > 0.1

    def test_category_filter_excludes_other_categories(self, sample_index):
        assert search(sample_index, "derivative", category="science") == []

    def test_unknown_category_returns_empty_list(self, sample_index):
        assert search(sample_index, "derivative", category="history") == []

    def test_no_match_with_high_threshold_is_empty(self, sample_index):
        assert search(sample_index, "xyzxyz-no-match", min_score=0.5) == []

    def test_query_of_only_stop_words_is_empty(self, sample_index):
        assert search(sample_index, "the and for") == []

    def test_scores_within_unit_interval(self, sample_index):
        results = search(
            sample_index, "cell function loop derivative", min_score=0.0, max_results=50
        )
        assert len(results) == len(sample_index)
        assert all(0.0 <= r.score <= 1.0 for r in results)

    def test_results_sorted_descending(self, sample_index):
        results = search(sample_index, "derivative limit function", min_score=0.0, max_results=50)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_own_text_ranks_first(self, make_source):
        content = "Photosynthesis converts light energy into chemical energy."
        index, _ = bootstrap_index(
            [make_source([{"title": "Plants", "content": content, "category": "biology"}])]
        )
        results = search(index, content)

        assert results[0].passage.content == content
        assert results[0].score == pytest.approx(1.0)

    def test_equal_scores_keep_ingestion_order(self, make_source):
        docs = [
            {"title": f"Copy {i}", "content": "Limits and derivatives.", "category": "math"}
            for i in range(3)
        ]
        index, _ = bootstrap_index([make_source(docs)])
        results = search(index, "derivatives")

        assert [r.passage.title for r in results] == ["Copy 0", "Copy 1", "Copy 2"]
        assert len({r.score for r in results}) == 1

    def test_max_results_truncates(self, seed_index):
        results = search(seed_index, "tyt konuları", min_score=0.0, max_results=2)
        assert len(results) == 2

    def test_min_score_filters(self, sample_index):
        everything = search(sample_index, "derivative cell", min_score=0.0, max_results=50)
        threshold = everything[0].score
        filtered = search(sample_index, "derivative cell", min_score=threshold, max_results=50)
        assert all(r.score >= threshold for r in filtered)
        assert len(filtered) < len(everything)

    def test_result_carries_passage_id(self, sample_index):
        result = search(sample_index, "membrane")[0]
        assert result.passage_id == result.passage.passage_id
        assert result.passage.title == "Cell Biology"


class TestHighlights:
    """Tests for query-term highlighting."""

    def test_counts_and_positions_case_insensitive(self):
        highlights = find_highlights("Türev ve türev kuralları. TÜREV", ["türev"])

        assert len(highlights) == 1
        assert highlights[0].term == "türev"
        assert highlights[0].count == 3
        assert highlights[0].positions == [0, 9, 26]

    def test_whole_words_only(self):
        assert find_highlights("Derivatives everywhere", ["derivative"]) == []

    def test_terms_without_matches_are_omitted(self):
        highlights = find_highlights("The limit exists", ["limit", "slope"])
        assert [h.term for h in highlights] == ["limit"]

    def test_repeated_query_terms_reported_once(self):
        highlights = find_highlights("limit of a limit", ["limit", "limit"])
        assert len(highlights) == 1
        assert highlights[0].count == 2

    def test_search_results_include_highlights(self, sample_index):
        result = search(sample_index, "derivative", category="math")[0]
        derivative = next(h for h in result.highlights if h.term == "derivative")

        assert derivative.count >= 1
        for position in derivative.positions:
            assert result.passage.content[position : position + 10].lower() == "derivative"


class TestRetrievalService:
    """Tests for the service wrapper over the knowledge base."""

    def test_defaults_applied(self, sample_index):
        service = RetrievalService(KnowledgeBase(sample_index), default_max_results=1)
        assert len(service.search("derivative cell loop", min_score=0.0)) == 1

    def test_delegates_to_index(self, retrieval_service, sample_index):
        assert retrieval_service.categories() == sample_index.categories()
        assert retrieval_service.passages_by_category("math") == sample_index.passages_by_category(
            "math"
        )
        assert retrieval_service.stats() == sample_index.stats()

    def test_service_applies_query_length_limit(self, sample_index):
        service = RetrievalService(KnowledgeBase(sample_index), max_query_length=5)
        with pytest.raises(QueryTooLongError):
            service.search("derivative")
