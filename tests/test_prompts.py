from interview_prep.domain import Chunk, ScoredChunk
from interview_prep.interview import build_evaluation_prompt, build_question_prompt, build_system_prompt


def scored(text, source, score=1):
    return ScoredChunk(
        chunk=Chunk(text=text, chunk_index=0, source_tag=source),
        score=score,
        document_id=f"{source}-id"
    )


def test_question_prompt_embeds_count_and_job_description():
    prompt = build_question_prompt("Senior Python engineer with {braces}", 7)
    assert "generate exactly 7 relevant" in prompt
    assert "Generate exactly 7 questions" in prompt
    assert "Senior Python engineer with {braces}" in prompt
    assert "JSON array of strings" in prompt
    assert "Technical questions (40-50% of questions)" in prompt
    assert "Progress from easier to more challenging questions" in prompt


def test_evaluation_prompt_partitions_context_by_source():
    chunks = [
        scored("Resume part one.", "resume"),
        scored("JD part.", "job_description"),
        scored("Resume part two.", "resume"),
    ]
    prompt = build_evaluation_prompt("Why Python?", "Because it is readable.", chunks)
    assert "Question: Why Python?" in prompt
    assert "Candidate's Answer: Because it is readable." in prompt
    assert "Resume Context:\nResume part one.\n\nResume part two.\n\nJob Description Context" in prompt
    assert "Job Description Context:\nJD part.\n\n" in prompt
    assert '"score": 8' in prompt


def test_evaluation_prompt_placeholders_for_empty_context():
    prompt = build_evaluation_prompt("Q?", "A.", [])
    assert "Resume Context:\nNo resume context available" in prompt
    assert "Job Description Context:\nNo job description context available" in prompt


def test_prompts_are_deterministic():
    assert build_system_prompt() == build_system_prompt()
    assert build_question_prompt("jd", 10) == build_question_prompt("jd", 10)
    chunks = [scored("text", "resume")]
    assert build_evaluation_prompt("q", "a", chunks) == build_evaluation_prompt("q", "a", chunks)


def test_system_prompt_describes_interviewer():
    assert build_system_prompt().startswith("You are an AI interview assistant.")
