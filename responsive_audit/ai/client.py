"""Claude API client wrapper used by the layout analyzer."""

from __future__ import annotations

import json
import logging
import os
import re
import time
from pathlib import Path
from typing import Any, Optional

import anthropic

logger = logging.getLogger(__name__)

# Configurable debug directory, set by the pipeline at startup
_debug_dir: Path | None = None


def set_debug_dir(path: Path) -> None:
    """Set the directory for dumping AI exchanges."""
    global _debug_dir
    _debug_dir = path
    _debug_dir.mkdir(parents=True, exist_ok=True)


def _get_debug_dir() -> Path:
    """Get or create the debug directory."""
    global _debug_dir
    if _debug_dir is None:
        _debug_dir = Path(".responsive-audit") / "debug"
    _debug_dir.mkdir(parents=True, exist_ok=True)
    return _debug_dir


class AIClient:
    """Wrapper around the Anthropic Claude API."""

    def __init__(self, model: str = "claude-opus-4-6", max_tokens: int = 4096):
        api_key = os.environ.get("ANTHROPIC_API_KEY")
        if not api_key:
            raise EnvironmentError(
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Set it to use the built-in layout analyzer."
            )
        self.client = anthropic.Anthropic(api_key=api_key, timeout=300.0)
        self.model = model
        self.max_tokens = max_tokens
        self._call_count = 0

    @property
    def call_count(self) -> int:
        return self._call_count

    def complete_with_images(
        self,
        system_prompt: str,
        user_message: str,
        images_base64: list[str],
        media_type: str = "image/png",
        max_tokens: Optional[int] = None,
        temperature: float = 0.2,
    ) -> str:
        """Send one user turn made of several images followed by text."""
        self._call_count += 1
        tokens = max_tokens or self.max_tokens
        logger.info(
            "Calling AI with %d images (call #%d, model=%s, max_tokens=%d)...",
            len(images_base64), self._call_count, self.model, tokens,
        )

        content: list[dict[str, Any]] = [
            {
                "type": "image",
                "source": {"type": "base64", "media_type": media_type, "data": data},
            }
            for data in images_base64
        ]
        content.append({"type": "text", "text": user_message})
        logged_message = f"[{len(images_base64)} IMAGES ATTACHED]\n{user_message}"

        try:
            call_start = time.time()
            response = self.client.messages.create(
                model=self.model,
                max_tokens=tokens,
                temperature=temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": content}],
            )
            if not response.content:
                self._save_exchange_log(self._call_count, system_prompt, logged_message, "", "empty response")
                raise ValueError("AI returned an empty response")
            text = response.content[0].text
            logger.info("AI image response received in %.1fs (%d chars)",
                        time.time() - call_start, len(text))

            if response.stop_reason == "max_tokens":
                logger.warning(
                    "AI response was truncated at max_tokens=%d. "
                    "Consider increasing ai_max_tokens in config.", tokens,
                )

            self._save_exchange_log(self._call_count, system_prompt, logged_message, text, None)
            return text
        except anthropic.APIError as e:
            logger.error("Claude API error (with images): %s", e)
            self._save_exchange_log(self._call_count, system_prompt, logged_message, "", str(e))
            raise

    def complete_json_with_images(
        self,
        system_prompt: str,
        user_message: str,
        images_base64: list[str],
        max_tokens: Optional[int] = None,
    ) -> dict[str, Any]:
        """Image completion whose reply is parsed as a JSON object."""
        text = self.complete_with_images(
            system_prompt, user_message, images_base64, max_tokens=max_tokens,
        )
        return self._parse_json_response(text)

    @staticmethod
    def _parse_json_response(text: str) -> dict[str, Any]:
        """Parse an AI reply as JSON, tolerating code fences and surrounding prose."""
        text = text.strip()

        fence = re.search(r"```(?:json)?\s*\n(.*?)\n```", text, re.DOTALL)
        if fence:
            text = fence.group(1).strip()

        try:
            return json.loads(text, strict=False)
        except json.JSONDecodeError:
            pass

        # Fall back to the outermost object, dropping trailing commas
        first_brace = text.find("{")
        last_brace = text.rfind("}")
        if first_brace != -1 and last_brace > first_brace:
            cleaned = re.sub(r",\s*([}\]])", r"\1", text[first_brace:last_brace + 1])
            try:
                return json.loads(cleaned, strict=False)
            except json.JSONDecodeError as e:
                raise ValueError(f"AI returned invalid JSON: {e}") from e
        raise ValueError("AI returned no JSON object")

    @staticmethod
    def _save_exchange_log(
        call_number: int,
        system_prompt: str,
        user_message: str,
        response_text: str,
        error: str | None,
    ) -> None:
        """Save the full AI exchange (prompt + response) to a log file."""
        try:
            debug_dir = _get_debug_dir()
            ts = time.strftime("%Y%m%d_%H%M%S")
            log_file = debug_dir / f"ai_call_{ts}_{call_number:03d}.log"

            with open(log_file, "w", encoding="utf-8") as f:
                f.write(f"=== AI CALL #{call_number} at {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")
                f.write(f"=== SYSTEM PROMPT ({len(system_prompt)} chars) ===\n")
                f.write(system_prompt)
                f.write(f"\n\n=== USER MESSAGE ({len(user_message)} chars) ===\n")
                f.write(user_message)
                f.write(f"\n\n=== RESPONSE ({len(response_text)} chars) ===\n")
                f.write(response_text if response_text else "(empty)")
                if error:
                    f.write(f"\n\n=== ERROR ===\n{error}\n")

            logger.debug("AI exchange logged to %s", log_file)
        except OSError as log_err:
            logger.debug("Failed to save AI exchange log: %s", log_err)
