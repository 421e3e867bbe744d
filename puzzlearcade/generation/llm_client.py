from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role, TokenUsage


class LLMClient(BaseModel):
    """
    Client for puzzle generation requests via LiteLLM.

    Keeps the messages of the current request and the token usage of every
    completion made through it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    json_mode: bool = True
    messages: List[Dict[str, str]] = Field(default_factory=list)
    usage: TokenUsage = Field(default_factory=TokenUsage)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the pending request.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Send the pending messages to the model.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        if self.json_mode:
            params.setdefault("response_format", {"type": "json_object"})

        response = litellm.completion(**params)
        self._record_usage(response)
        return response

    def ask(self, system_prompt: str, user_prompt: str, **kwargs: Any) -> str:
        """
        Run a single system + user exchange and return the reply text.

        The exchange replaces any earlier messages; the reply is kept in the
        history so it can be inspected afterwards.
        """
        self.clear_messages()
        self.add_message("system", system_prompt)
        self.add_message("user", user_prompt)

        response = self.completion(**kwargs)
        content = response.choices[0].message.content or ""
        self.add_message("assistant", content)
        return content

    def _record_usage(self, response: Any) -> None:
        usage = getattr(response, 'usage', None)
        if not usage:
            return
        self.usage.prompt_tokens += getattr(usage, 'prompt_tokens', 0) or 0
        self.usage.completion_tokens += getattr(usage, 'completion_tokens', 0) or 0
        self.usage.total_tokens += getattr(usage, 'total_tokens', 0) or 0
