"""Color intelligence generation through an LLM provider."""

from __future__ import annotations

import asyncio
import logging
import time

from hueprint.core.agents.providers.base import LLMProvider
from hueprint.core.agents.providers.errors import LLMProviderError
from hueprint.core.color.models import ColorDescriptor, PerceptualWeight
from hueprint.core.intel.errors import InferenceErrorKind
from hueprint.core.intel.extraction import extract_intelligence
from hueprint.core.intel.prompts import IntelligenceContext, build_messages
from hueprint.core.intel.result import InferenceResult, failure_result

logger = logging.getLogger(__name__)


class ColorIntelligenceGenerator:
    """Calls the inference service and extracts intelligence from its reply.

    Every failure mode is returned as an InferenceResult; nothing raises.

    Example:
        >>> generator = ColorIntelligenceGenerator(provider, model="gpt-4.1-mini")
        >>> result = await generator.generate(describe(color))
        >>> if result.success:
        ...     print(result.output.suggested_name)
    """

    def __init__(
        self,
        provider: LLMProvider,
        *,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 800,
        timeout_seconds: float = 30.0,
    ) -> None:
        """Initialize generator.

        Args:
            provider: LLM provider
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Completion token limit
            timeout_seconds: Upper bound on one provider call
        """
        self.provider = provider
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds

    async def generate(
        self,
        descriptor: ColorDescriptor,
        context: IntelligenceContext | None = None,
        perceptual_weight: PerceptualWeight | None = None,
    ) -> InferenceResult:
        """Generate intelligence for a math-only descriptor.

        Args:
            descriptor: Base descriptor from describe()
            context: Optional semantic role and display name
            perceptual_weight: Optional weight hint, enables balancing guidance

        Returns:
            InferenceResult; failures carry TIMEOUT, UNAVAILABLE or MALFORMED
        """
        messages = build_messages(descriptor, context, perceptual_weight)
        start = time.perf_counter()

        try:
            response = await asyncio.wait_for(
                self.provider.generate_text_async(
                    messages=messages,
                    model=self.model,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout_seconds,
            )
        except TimeoutError:
            message = f"Inference timed out after {self.timeout_seconds}s"
            logger.warning(f"{message} for {descriptor.name}")
            return failure_result(InferenceErrorKind.TIMEOUT, message)
        except LLMProviderError as e:
            logger.warning(f"Inference unavailable for {descriptor.name}: {e}")
            return failure_result(InferenceErrorKind.UNAVAILABLE, str(e))
        except Exception as e:
            logger.warning(f"Inference failed for {descriptor.name}: {e}")
            return failure_result(InferenceErrorKind.UNAVAILABLE, f"Inference failed: {e}")

        duration_ms = (time.perf_counter() - start) * 1000
        result = extract_intelligence(response.content, fallback_name=descriptor.name)
        if not result.success:
            logger.warning(f"Malformed inference response for {descriptor.name}")
            return result

        logger.debug(f"Generated intelligence for {descriptor.name} in {duration_ms:.0f}ms")
        return result.model_copy(
            update={
                "metadata": {
                    "duration_ms": duration_ms,
                    "model": self.model,
                    "total_tokens": response.metadata.token_usage.total_tokens,
                }
            }
        )
