from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Client for one-shot LLM questions via LiteLLM.

    Every question starts a fresh conversation (system prompt + one user
    message); the last exchange is kept in `messages` for inspection.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    system_prompt: Optional[str] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation history.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages from the conversation history."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """Get a copy of the conversation history in OpenAI format."""
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Call litellm.completion() with the current messages.

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

        return litellm.completion(**params)

    def ask(self, prompt: str, **kwargs: Any) -> str:
        """
        Ask a single question and return the reply text.

        Args:
            prompt: User message
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The assistant's reply (empty string if the model sent no content)
        """
        self.clear_messages()
        if self.system_prompt:
            self.add_message("system", self.system_prompt)
        self.add_message("user", prompt)

        response = self.completion(**kwargs)
        content = response.choices[0].message.content or ""
        self.add_message("assistant", content)
        return content
