from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from aleph_alpha_api import (
    LUMINOUS_BASE,
    BatchSemanticEmbeddingRequest,
    BoundingBox,
    CompletionRequest,
    ControlTokenOverlap,
    EmbeddingRequest,
    EvaluationRequest,
    ExplanationRequest,
    Hosting,
    Image,
    ImageControl,
    Prompt,
    PromptGranularity,
    PromptGranularityType,
    SemanticEmbeddingRequest,
    TargetGranularity,
    Text,
    TextControl,
    TokenControl,
    TokenizationRequest,
    UserChange,
)


def test_completion_request_sends_only_required_fields_by_default() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "An apple a day", 10)
    assert req.to_payload() == {
        "model": "luminous-base",
        "prompt": [{"type": "text", "data": "An apple a day"}],
        "maximum_tokens": 10,
    }


def test_completion_request_round_trip_keeps_exactly_the_set_fields() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "An apple a day", 10).set(
        temperature=0.8,
        top_k=50,
        top_p=0.95,
        best_of=2,
        minimum_tokens=2,
        stop_sequences=["\n"],
        hosting=Hosting.ALEPH_ALPHA,
    )
    decoded = json.loads(json.dumps(req.to_payload()))
    assert set(decoded) == {
        "model",
        "prompt",
        "maximum_tokens",
        "temperature",
        "top_k",
        "top_p",
        "best_of",
        "minimum_tokens",
        "stop_sequences",
        "hosting",
    }
    assert decoded["temperature"] == 0.8
    assert decoded["top_k"] == 50
    assert decoded["hosting"] == "aleph-alpha"
    assert decoded["stop_sequences"] == ["\n"]


def test_constructor_kwargs_and_setter_are_equivalent() -> None:
    prompt = Prompt.from_text("Hello")
    by_kwargs = CompletionRequest(model=LUMINOUS_BASE, prompt=prompt, maximum_tokens=5, echo=True, n=2)
    by_setter = CompletionRequest(model=LUMINOUS_BASE, prompt=prompt, maximum_tokens=5).set(echo=True, n=2)
    assert by_kwargs.to_payload() == by_setter.to_payload()


def test_explicit_null_is_sent() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "x", 1, logit_bias=None)
    payload = req.to_payload()
    assert "logit_bias" in payload
    assert payload["logit_bias"] is None


def test_logit_bias_keys_become_strings() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "x", 1).set(logit_bias={49222: -1.5})
    assert req.to_payload()["logit_bias"] == {"49222": -1.5}


def test_setter_validates_values() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "x", 1)
    with pytest.raises(ValidationError):
        req.set(top_k="many")


def test_setter_rejects_unknown_fields() -> None:
    req = CompletionRequest.from_text(LUMINOUS_BASE, "x", 1)
    with pytest.raises(ValueError):
        req.set(not_a_field=1)


def test_no_local_semantic_validation() -> None:
    # best_of must exceed n, but only the API enforces that.
    req = CompletionRequest.from_text(LUMINOUS_BASE, "x", 1).set(best_of=1, n=3)
    assert req.to_payload()["best_of"] == 1


def test_plain_string_prompt_becomes_text_item() -> None:
    req = EvaluationRequest(model=LUMINOUS_BASE, prompt="An apple a day keeps the", completion_expected=" doctor away")
    assert req.to_payload()["prompt"] == [{"type": "text", "data": "An apple a day keeps the"}]


def test_multimodal_prompt_keeps_order_and_controls() -> None:
    prompt = Prompt.from_items(
        [
            Image.from_bytes(b"\x89PNG", controls=[
                ImageControl(rect=BoundingBox(top=0.1, left=0.2, width=0.5, height=0.5), factor=2.0)
            ]),
            Text(data="A picture of", controls=[
                TextControl(start=2, length=7, factor=0.5, token_overlap=ControlTokenOverlap.COMPLETE)
            ]),
        ]
        + list(Prompt.from_token_ids([49222, 15], controls=[TokenControl(index=1, factor=3.0)]))
    )
    payload = CompletionRequest(model=LUMINOUS_BASE, prompt=prompt, maximum_tokens=1).to_payload()
    assert [item["type"] for item in payload["prompt"]] == ["image", "text", "token_ids"]
    image, text, token_ids = payload["prompt"]
    assert image == {
        "type": "image",
        "data": "iVBORw==",
        "controls": [
            {"rect": {"top": 0.1, "left": 0.2, "width": 0.5, "height": 0.5}, "factor": 2.0}
        ],
    }
    assert text["controls"] == [{"start": 2, "length": 7, "factor": 0.5, "token_overlap": "complete"}]
    assert token_ids == {"type": "token_ids", "data": [49222, 15], "controls": [{"index": 1, "factor": 3.0}]}


def test_image_from_path(tmp_path) -> None:  # noqa: ANN001
    path = tmp_path / "pixel.png"
    path.write_bytes(b"\x89PNG")
    item = Image.from_path(path)
    assert item.model_dump(mode="json", by_alias=True) == {"type": "image", "data": "iVBORw=="}


def test_prompt_parses_from_wire_shape() -> None:
    prompt = Prompt.model_validate([{"type": "token_ids", "data": [1, 2]}, {"type": "text", "data": "hi"}])
    assert len(prompt) == 2
    assert prompt[0].data == [1, 2]
    assert isinstance(prompt[1], Text)


def test_empty_prompt_serializes_to_empty_list() -> None:
    assert Prompt.empty().model_dump(mode="json") == []


def test_embedding_request_type_alias() -> None:
    req = EmbeddingRequest.from_text(LUMINOUS_BASE, "Lorem ipsum", 1, "max", True).set(embedding_type="text")
    assert req.to_payload() == {
        "model": "luminous-base",
        "prompt": [{"type": "text", "data": "Lorem ipsum"}],
        "layers": [1],
        "pooling": ["max"],
        "normalize": True,
        "type": "text",
    }


def test_semantic_embedding_always_sends_representation() -> None:
    req = SemanticEmbeddingRequest(model=LUMINOUS_BASE, prompt="An apple a day", compress_to_size=128)
    assert req.to_payload() == {
        "model": "luminous-base",
        "prompt": [{"type": "text", "data": "An apple a day"}],
        "representation": "symmetric",
        "compress_to_size": 128,
    }


def test_batch_semantic_embedding_prompts() -> None:
    req = BatchSemanticEmbeddingRequest(model=LUMINOUS_BASE, prompts=["a", Prompt.from_text("b")])
    payload = req.to_payload()
    assert payload["prompts"] == [[{"type": "text", "data": "a"}], [{"type": "text", "data": "b"}]]
    assert "compress_to_size" not in payload


def test_explanation_request_nested_granularity() -> None:
    req = ExplanationRequest(
        model=LUMINOUS_BASE,
        prompt="I am a programmer and French. My favorite food is",
        target=" pizza with cheese",
        target_granularity=TargetGranularity.TOKEN,
        prompt_granularity=PromptGranularity(type=PromptGranularityType.CUSTOM, delimiter="."),
        normalize=True,
    )
    payload = req.to_payload()
    assert payload["target_granularity"] == "token"
    assert payload["prompt_granularity"] == {"type": "custom", "delimiter": "."}
    assert "postprocessing" not in payload
    assert "control_factor" not in payload


def test_tokenization_request_always_sends_flags() -> None:
    req = TokenizationRequest(model=LUMINOUS_BASE, prompt="Hello, World!")
    assert req.to_payload() == {
        "model": "luminous-base",
        "prompt": "Hello, World!",
        "tokens": False,
        "token_ids": True,
    }


def test_user_change_requires_threshold() -> None:
    with pytest.raises(ValidationError):
        UserChange()
    assert UserChange(out_of_credits_threshold=5).to_payload() == {"out_of_credits_threshold": 5}
