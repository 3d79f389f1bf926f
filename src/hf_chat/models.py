"""Free Hugging Face models usable with the text generation task."""

FREE_MODELS: dict[str, str] = {
    "MICROSOFT_DIALO_GPT": "microsoft/DialoGPT-large",
    "FACEBOOK_BLENDER": "facebook/blenderbot-400M-distill",
    "GPT2": "gpt2",
    "DISTIL_GPT2": "distilgpt2",
    "FLAN_T5_SMALL": "google/flan-t5-small",
    "FLAN_T5_BASE": "google/flan-t5-base",
}

# Application model aliases -> Hub model identifiers
DEFAULT_MODEL_ALIASES: dict[str, str] = {
    "chat-model": FREE_MODELS["MICROSOFT_DIALO_GPT"],
    "chat-model-reasoning": FREE_MODELS["FLAN_T5_BASE"],
    "title-model": FREE_MODELS["DISTIL_GPT2"],
    "artifact-model": FREE_MODELS["FLAN_T5_BASE"],
}

__all__ = ["FREE_MODELS", "DEFAULT_MODEL_ALIASES"]
