import pytest

from interview_prep.pdf import chunk_text, split_sentences


def test_one_word_sentences_become_separate_chunks():
    assert chunk_text("A. B. C.", 1) == ["A.", "B.", "C."]


def test_sentences_are_packed_up_to_target():
    text = "One two three. Four five. Six seven eight nine. Ten."
    assert chunk_text(text, 5) == ["One two three. Four five.", "Six seven eight nine. Ten."]


def test_oversized_sentence_is_kept_whole():
    long_sentence = " ".join(["word"] * 20) + "."
    chunks = chunk_text(f"Short one. {long_sentence} Tail here.", 5)
    assert chunks == ["Short one.", long_sentence, "Tail here."]


def test_text_without_boundaries_is_returned_whole():
    text = "no terminal punctuation at all"
    assert chunk_text(text, 2) == [text]


def test_empty_text_returns_single_element():
    assert chunk_text("", 10) == [""]


def test_trailing_text_after_last_boundary_is_kept():
    assert split_sentences("First. Second! trailing words") == ["First.", "Second!", "trailing words"]
    assert chunk_text("First. Second! trailing words", 100) == ["First. Second! trailing words"]


@pytest.mark.parametrize("target", [1, 3, 7, 500])
def test_chunks_cover_the_whole_text(target):
    text = (
        "Built APIs in Python. Led a migration to the cloud! "
        "Why does it matter? Because uptime went from 99% to 99.9%. done"
    )
    chunks = chunk_text(text, target)
    # Sentence splitting may break "99.9%" apart; only whitespace differs
    assert "".join("".join(chunks).split()) == "".join(text.split())
    for chunk in chunks:
        sentences = split_sentences(chunk)
        assert len(chunk.split()) <= target or len(sentences) == 1


def test_rechunking_a_small_chunk_is_idempotent():
    text = "Alpha beta. Gamma delta epsilon. Zeta."
    for chunk in chunk_text(text, 4):
        assert chunk_text(chunk, 4) == [chunk]


def test_newlines_between_sentences_are_normalized():
    assert chunk_text("Line one.\nLine two.", 100) == ["Line one. Line two."]
