"""
Advisory client: turns a raid query into counter recommendations.
"""

import logging
from typing import Any

from .config import AdvisorConfig
from .exceptions import NetworkError, ValidationError
from .llm_client import LLMClientError, create_llm_client
from .models import RaidQuery, Recommendation
from .parser import parse_recommendations
from .prompts import SYSTEM_INSTRUCTION, build_user_prompt

logger = logging.getLogger("tera-raid-advisor")


class RaidAdvisor:
    """Asks the generative-text service for solo counters to a Tera Raid.

    One call to ``fetch_advice`` makes at most one request: no retries and no
    caching of repeated queries. The LLM client is built on first use, so a
    missing credential surfaces as a request failure instead of at startup.

    Args:
        config: Advisor settings; defaults apply when omitted.
        llm_client: Any object with an async ``generate(prompt,
            system_instruction=..., max_tokens=...)`` method. Built from
            ``config`` when omitted.

    Example:
        >>> advisor = RaidAdvisor(llm_client=MockLLMClient(responses=[reply]))
        >>> query = RaidQuery(target_name="ピカチュウ", tera_type=TeraType.WATER)
        >>> [r.name for r in await advisor.fetch_advice(query)]
        ['ドオー', 'ハラバリー', 'ヘイラッシャ']
    """

    def __init__(self, config: AdvisorConfig | None = None, llm_client: Any | None = None) -> None:
        self.config = config or AdvisorConfig()
        self._llm_client = llm_client

    def _get_client(self) -> Any:
        if self._llm_client is None:
            self._llm_client = create_llm_client(self.config)
        return self._llm_client

    async def fetch_advice(self, query: RaidQuery) -> list[Recommendation]:
        """Request and parse recommendations for ``query``.

        Args:
            query: Target name, Tera type and raid rank

        Returns:
            Recommendations in the order the service emitted them

        Raises:
            ValidationError: If the target name or Tera type is missing
            NetworkError: If the service call fails for any reason
            FormatError: If the reply holds no parseable recommendation array
        """
        missing = query.missing_fields()
        if missing:
            raise ValidationError(
                f"Missing required query fields: {', '.join(missing)}",
                missing_fields=missing,
            )

        prompt = build_user_prompt(query)
        logger.debug(f"🔎 Requesting raid advice: {prompt}")

        try:
            client = self._get_client()
            raw_text = await client.generate(
                prompt,
                system_instruction=SYSTEM_INSTRUCTION,
                max_tokens=self.config.max_tokens,
            )
        except LLMClientError as e:
            raise NetworkError(f"Advice request failed: {e}") from e

        recommendations = parse_recommendations(raw_text)
        logger.debug(f"✅ Received {len(recommendations)} recommendations")
        return recommendations
