"""
Completion backends used to turn text plus a prompt into a summary.
"""

import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from yt_summary.utils.error_handling import CompletionFailure, ConfigurationError
from yt_summary.utils.logger import logging


class SummarizationClient(ABC):
    """A capability that summarizes text according to a prompt."""

    @abstractmethod
    def summarize(self, text: str, prompt: str) -> str:
        """
        Summarize text.

        Raises:
            CompletionFailure: the backend was unreachable, failed or returned nothing
        """


class AichatClient(SummarizationClient):
    """Runs the aichat CLI with the text on stdin and the prompt as argument."""

    def __init__(self, executable: str = "aichat", model: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.executable = executable
        self.model = model
        self.timeout = timeout

    def _build_command(self, prompt: str) -> List[str]:
        cmd = [self.executable]
        if self.model:
            cmd.extend(["-m", self.model])
        cmd.append(prompt)
        return cmd

    def summarize(self, text: str, prompt: str) -> str:
        cmd = self._build_command(prompt)
        logging.debug(f"Running {self.executable} on {len(text)} characters")

        try:
            result = subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                timeout=self.timeout,
            )
        except OSError as e:
            raise CompletionFailure(f"Could not run {self.executable}: {str(e)}") from e
        except subprocess.CalledProcessError as e:
            raise CompletionFailure(
                f"{self.executable} exited with status {e.returncode}: {(e.stderr or '').strip()}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CompletionFailure(f"{self.executable} timed out after {e.timeout} seconds") from e

        output = result.stdout.rstrip()
        if not output.strip():
            raise CompletionFailure(f"{self.executable} returned no output")
        return output


class ChatModelClient(SummarizationClient):
    """Summarizes through a LangChain chat model (Groq by default)."""

    def __init__(
        self,
        model: str,
        model_provider: str = "groq",
        temperature: float = 0.0,
        max_tokens: int = 2048,
    ):
        """
        Initialize the chat model.

        Args:
            model: Model name understood by the provider
            model_provider: LangChain provider key, e.g. "groq"
            temperature: Sampling temperature
            max_tokens: Upper bound on generated tokens
        """
        self.model = model
        self.llm = init_chat_model(
            model=model,
            model_provider=model_provider,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        self.prompt_template = ChatPromptTemplate.from_messages([
            ("system", "{prompt}"),
            ("human", "{text}"),
        ])

    def summarize(self, text: str, prompt: str) -> str:
        messages = self.prompt_template.format_messages(prompt=prompt, text=text)
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            raise CompletionFailure(f"Chat model {self.model} failed: {str(e)}") from e

        content = response.content if isinstance(response.content, str) else ""
        if not content.strip():
            raise CompletionFailure(f"Chat model {self.model} returned no output")
        return content.strip()


def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid completion timeout: {value!r}") from e


def build_client(app_config, backend: Optional[str] = None) -> SummarizationClient:
    """
    Create the completion backend selected by the application config.

    Args:
        app_config: Application configuration (see yt_summary.config.Config)
        backend: Overrides app_config.BACKEND when given

    Returns:
        A SummarizationClient instance
    """
    backend = backend or app_config.BACKEND
    if backend == "aichat":
        return AichatClient(
            executable=app_config.AICHAT_PATH,
            model=app_config.AICHAT_MODEL,
            timeout=_parse_timeout(app_config.COMPLETION_TIMEOUT),
        )
    if backend == "langchain":
        return ChatModelClient(
            model=app_config.DEFAULT_SUMMARY_MODEL,
            model_provider=app_config.MODEL_PROVIDER,
        )
    raise ConfigurationError(f"Unknown completion backend: {backend}")
