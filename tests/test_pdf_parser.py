import pytest

from interview_prep.pdf import extract_text_from_pdf


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_text_from_pdf(tmp_path / "missing.pdf")


def test_non_pdf_content_raises_value_error(tmp_path):
    path = tmp_path / "fake.pdf"
    path.write_bytes(b"this is not a pdf")
    with pytest.raises(ValueError, match="Failed to extract text from PDF"):
        extract_text_from_pdf(path)
