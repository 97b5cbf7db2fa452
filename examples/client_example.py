"""
Usage Examples for the OpenAI SDK
Demonstrates configuration and both call styles
"""

import asyncio
import logging

from openai_sdk import (
    ApiError,
    AudioResponseFormat,
    AuthenticationError,
    CallResult,
    ConfigLoader,
    ConfigValidator,
    ImageSize,
    NetworkError,
    OpenAIClient,
    OpenAIConfig,
    set_log_level,
)


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> OpenAIConfig:
    """Configure the client programmatically with all options"""
    loader = ConfigLoader()

    return loader.load(
        config={
            "api_key": "sk-your-key",
            "organization": "org-your-organization",
            "base_url": "https://api.openai.com",
            "timeout": 30,
        }
    )


# =============================================================================
# Example 2: Merged Configuration (File + Environment + Programmatic)
# =============================================================================

def merged_config_example() -> OpenAIConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment > file

    The file may use either field names or the OPENAI_* secret names:

        {"OPENAI_API_KEY": "sk-...", "timeout": 120}
    """
    loader = ConfigLoader()

    return loader.load(
        file="./config/openai.json",
        env=True,
        config={"timeout": 120},
    )


# =============================================================================
# Example 3: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({"base_url": "ftp://example.com", "timeout": 0})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Example 4: Direct (async) Calls
# =============================================================================

async def direct_calls_example(client: OpenAIClient) -> None:
    """Await each endpoint and handle the error kinds separately"""
    try:
        chat = await client.chat.send(
            [
                client.chat.system_message("You answer in one sentence."),
                client.chat.user_message("What is the capital of France?"),
            ],
            max_tokens=50,
        )
        print(f"Chat: {chat.first_content}")

        embeddings = await client.embeddings.create("Hello world")
        print(f"Embedding size: {len(embeddings.data[0].embedding)}")

        images = await client.images.generate("A lighthouse at dusk", size=ImageSize.SMALL)
        print(f"Image URL: {images.data[0].url}")

        moderation = await client.moderation.moderate("I love sunny days")
        print(f"Flagged: {moderation.results[0].flagged}")

        with open("./speech.mp3", "rb") as f:
            subtitles = await client.audio.transcribe(
                f.read(), "speech.mp3", response_format=AudioResponseFormat.SRT
            )
        print(subtitles.text)

    except AuthenticationError:
        print("The API key was rejected")
    except ApiError as e:
        print(f"API error ({e.status_code}): {e.message}")
    except NetworkError as e:
        print(f"Network error [{e.code}]: {e.message}")


# =============================================================================
# Example 5: Callback Calls
# =============================================================================

def callback_example(client: OpenAIClient) -> None:
    """Start a call from synchronous code and receive the result in a callback"""
    def on_result(result: CallResult) -> None:
        if result.ok:
            print(f"Completion: {result.value.first_text}")
        else:
            print(f"Completion failed: {result.error}")

    handle = client.completions.send_with_callback("Say hello", on_result, max_tokens=16)

    if not handle.wait(timeout=30):
        handle.cancel()


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== OpenAI SDK Examples ===\n")

    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    set_log_level("DEBUG")

    print("1. Configuration Validation:")
    validation_example()
    print()

    client = OpenAIClient.from_environment()

    print("2. Direct Calls:")
    asyncio.run(direct_calls_example(client))
    print()

    print("3. Callback Calls:")
    callback_example(client)
