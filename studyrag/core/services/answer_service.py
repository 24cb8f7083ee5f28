"""Context assembly for question answering."""

import logging
from collections.abc import Sequence

from ..domain import AnswerContext
from .retrieval_service import RetrievalService, validate_query

logger = logging.getLogger(__name__)

ANSWER_MAX_RESULTS = 3


class AnswerService:
    """Builds the context text an external generator answers from.

    No model is called here; the caller hands ``context_text`` to
    whatever produces the natural-language answer.
    """

    def __init__(
        self,
        retrieval: RetrievalService,
        max_results: int = ANSWER_MAX_RESULTS,
    ) -> None:
        self.retrieval = retrieval
        self.max_results = max_results

    def answer(self, question: str, context: Sequence[str] = ()) -> AnswerContext:
        """Retrieve the top passages for a question and join them.

        Args:
            question: The user's question.
            context: Extra caller-supplied lines, appended after a blank line.

        Returns:
            AnswerContext with the joined text and the results used.

        Raises:
            ValidationError: If the question is empty.
            NotInitializedError: If the index has not finished loading.
        """
        clean_question = validate_query(question, self.retrieval.max_query_length)
        results = self.retrieval.search(clean_question, max_results=self.max_results)

        context_text = "\n\n".join(result.passage.content for result in results)
        if context:
            context_text += "\n\n" + "\n".join(context)

        logger.debug(f"Assembled context from {len(results)} passage(s) for {clean_question!r}")
        return AnswerContext(
            question=clean_question,
            context_text=context_text,
            search_results=results,
            has_relevant_info=bool(results),
        )
