from surveybot.nlu.completion import CompletionAPIError
from surveybot.nlu.extractor import FieldExtractor

MESSAGE = "Halo, saya Budi 081234567890. Booking untuk hari Senin, 15 Januari jam 14:00"


def test_extract_success(fake_completion):
    client = fake_completion(
        '{"phone_number":"081234567890","date":"Senin, 15 Januari 2026","time":"14:00","name":"Budi"}'
    )
    record = FieldExtractor(client).extract(MESSAGE)

    assert record.model_dump() == {
        "phone_number": "081234567890",
        "date": "Senin, 15 Januari 2026",
        "time": "14:00",
        "name": "Budi",
    }
    assert f'Message: "{MESSAGE}"' in client.prompts[0]


def test_extract_sanitizes_message_before_prompting(fake_completion):
    client = fake_completion('{"phone_number":"","date":"","time":"","name":""}')
    FieldExtractor(client).extract('Saya "Budi"\njam 3 sore')
    assert 'Message: "Saya  Budi  jam 3 sore"' in client.prompts[0]


def test_extract_prose_wrapped(fake_completion):
    client = fake_completion(
        'Here you go: {"phone_number":"0812","date":"","time":"","name":"Andi"} thanks'
    )
    record = FieldExtractor(client).extract("Andi 0812")
    assert record.name == "Andi"
    assert record.phone_number == "0812"


def test_extract_no_json(fake_completion):
    assert FieldExtractor(fake_completion("I cannot help with that.")).extract(MESSAGE) is None


def test_extract_api_error(fake_completion):
    client = fake_completion(error=CompletionAPIError("API error: 429", 429))
    assert FieldExtractor(client).extract(MESSAGE) is None


def test_extract_unexpected_error(fake_completion):
    client = fake_completion(error=RuntimeError("boom"))
    assert FieldExtractor(client).extract(MESSAGE) is None


def test_extract_calls_completion_once(fake_completion):
    client = fake_completion(error=CompletionAPIError("API error: 500", 500))
    FieldExtractor(client).extract(MESSAGE)
    assert len(client.prompts) == 1
