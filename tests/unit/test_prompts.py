from surveybot.nlu.prompts import build_prompt


def test_prompt_embeds_message_in_quotes():
    prompt = build_prompt("Saya Budi 0812")
    assert 'Message: "Saya Budi 0812"' in prompt


def test_prompt_has_output_contract():
    prompt = build_prompt("x")
    assert '{"phone_number":"","date":"","time":"","name":""}' in prompt
    assert "Return only the JSON, no explanation." in prompt
    assert "24-hour" in prompt
    assert "Senin, 15 Januari 2026" in prompt


def test_prompt_is_deterministic():
    assert build_prompt("halo") == build_prompt("halo")
