from quizapp.services.prompt import build_prompt


def test_topic_is_interpolated_verbatim():
    prompt = build_prompt('C++ "templates" & <generics>')
    assert 'following topic: "C++ "templates" & <generics>"' in prompt


def test_prompt_is_deterministic():
    assert build_prompt("Ancient Rome") == build_prompt("Ancient Rome")


def test_prompt_states_the_format_rules():
    prompt = build_prompt("Photosynthesis")
    assert "exactly 5" in prompt
    assert "exactly 4 options" in prompt
    assert "ONE option" in prompt
    assert "2-3 sentences" in prompt
    assert "1-3 reputable sources" in prompt
    assert "intermediate difficulty" in prompt
    assert '"All of the above"' in prompt and '"None of the above"' in prompt
    assert "respond ONLY with valid JSON" in prompt


def test_prompt_shows_every_field_of_the_question_shape():
    prompt = build_prompt("Photosynthesis")
    for key in ('"question"', '"options"', '"label"', '"text"', '"correctAnswer"',
                '"explanation"', '"sources"', '"title"', '"url"'):
        assert key in prompt
