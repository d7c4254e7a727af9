from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None,
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            ModelInvocationError: on network or provider API failures.
            AnalysisError: if the provider returned no usable content.
        """
