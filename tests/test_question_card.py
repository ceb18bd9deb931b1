import config
from cloudplus_exam.services.question_bank import load_questions
from cloudplus_exam.views.components.question_card import escape_markdown, prompt_markdown


def test_blank_lines_stay_inside_one_paragraph():
    md = prompt_markdown("Output of:\n\n  netstat -i\n\nWhich layer?", 21)

    assert "\n\n" not in md
    assert md.split("  \n") == [
        "**21. Output of:**",
        "&nbsp;",
        "**netstat -i**",
        "&nbsp;",
        "**Which layer?**",
    ]


def test_single_line_prompt():
    assert prompt_markdown("What is IaaS?", 3) == "**3. What is IaaS?**"


def test_markdown_characters_are_escaped():
    assert escape_markdown("$5 * 2 [a]_b") == r"\$5 \* 2 \[a\]\_b"
    assert prompt_markdown("Use *.tmp", 1) == r"**1. Use \*.tmp**"


def test_every_bundled_prompt_renders_bold_lines():
    for q in load_questions(config.QUESTION_BANK_FILE):
        for line in prompt_markdown(q.question, q.id).split("  \n"):
            assert line == "&nbsp;" or (line.startswith("**") and line.endswith("**")), q.id
            assert "\n\n" not in line
