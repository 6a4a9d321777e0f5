from types import SimpleNamespace

import pytest

from interview_prep.domain import Chunk
from interview_prep.errors import RetrievalError
from interview_prep.retrieval import extract_query_terms, find_relevant_chunks, generate_embedding


def doc(doc_id, file_type, *texts):
    return SimpleNamespace(
        id=doc_id,
        file_type=file_type,
        chunks=[Chunk(text=t, chunk_index=i, source_tag=file_type) for i, t in enumerate(texts)]
    )


def test_repeated_term_scores_each_occurrence():
    documents = [doc("r1", "resume", "I have experience experience", "no match here")]
    result = find_relevant_chunks("experience", documents, top_k=1)
    assert len(result) == 1
    assert result[0].text == "I have experience experience"
    assert result[0].score == 2
    assert result[0].document_id == "r1"
    assert result[0].source == "resume"


def test_short_terms_are_ignored():
    assert extract_query_terms("Go to API design") == ["design"]
    documents = [doc("r1", "resume", "go to api go to api", "design")]
    result = find_relevant_chunks("Go to API design", documents, top_k=2)
    assert [c.score for c in result] == [1, 0]
    assert result[0].text == "design"


def test_query_of_only_short_terms_scores_everything_zero():
    documents = [doc("r1", "resume", "api api api", "the api")]
    result = find_relevant_chunks("the api", documents, top_k=5)
    assert [c.score for c in result] == [0, 0]


def test_matching_is_case_insensitive_and_substring_based():
    documents = [doc("r1", "resume", "PARTY party", "nothing")]
    result = find_relevant_chunks("Party", documents, top_k=1)
    assert result[0].score == 2
    # "part" is found inside "party"
    assert find_relevant_chunks("part", documents, top_k=1)[0].score == 2


def test_results_sorted_by_score_and_ties_keep_document_order():
    documents = [
        doc("r1", "resume", "python", "python python", "nothing"),
        doc("j1", "job_description", "python", "python python python"),
    ]
    result = find_relevant_chunks("python", documents, top_k=10)
    assert [c.score for c in result] == [3, 2, 1, 1, 0]
    ones = [c for c in result if c.score == 1]
    assert [c.document_id for c in ones] == ["r1", "j1"]


def test_top_k_limits_and_edges():
    documents = [doc("r1", "resume", "alpha", "beta", "gamma")]
    assert len(find_relevant_chunks("alpha", documents, top_k=2)) == 2
    assert len(find_relevant_chunks("alpha", documents, top_k=10)) == 3
    assert find_relevant_chunks("alpha", documents, top_k=0) == []
    assert find_relevant_chunks("alpha", documents, top_k=-1) == []


def test_zero_score_never_outranks_a_match():
    documents = [doc("r1", "resume", "unrelated", "unrelated", "kubernetes")]
    result = find_relevant_chunks("kubernetes", documents, top_k=1)
    assert result[0].text == "kubernetes"


def test_regex_characters_in_query_are_literal():
    documents = [doc("r1", "resume", "c++ and c#", "cpp")]
    result = find_relevant_chunks("c++, (regex)", documents, top_k=1)
    assert result[0].score == 0
    assert find_relevant_chunks("c++!", documents, top_k=1)[0].score == 0
    assert find_relevant_chunks("c++ and", documents, top_k=1)[0].score == 0


def test_malformed_chunk_raises_retrieval_error():
    broken = SimpleNamespace(id="x", file_type="resume", chunks=[SimpleNamespace(text=None)])
    with pytest.raises(RetrievalError):
        find_relevant_chunks("experience", [broken], top_k=2)


def test_missing_document_raises_retrieval_error():
    with pytest.raises(RetrievalError):
        find_relevant_chunks("experience", [None], top_k=2)


def test_embedding_is_empty():
    assert generate_embedding("anything") == []
