"""
Emission factor matching utilities.

Provides exact lookup and fuzzy category suggestions against the static
emission factor table.
"""

import logging
from typing import Optional, Tuple

from rapidfuzz import fuzz, process

from app.utils.constants import CATEGORY_SUGGESTION_THRESHOLD
from app.utils.emission_factors import categories_for, lookup_factor

logger = logging.getLogger(__name__)


class FactorMatcher:
    """
    Service for matching activity categories to emission factors.

    Exact matches come straight from the table. Fuzzy matching never changes a
    footprint; it only names the category the user most likely meant.
    """

    DEFAULT_THRESHOLD = CATEGORY_SUGGESTION_THRESHOLD

    def exact_match(self, activity_type: str, category: str) -> Optional[float]:
        """
        Find the exact emission factor for a type and category.

        Returns:
            Factor if found, None otherwise
        """
        factor = lookup_factor(activity_type, category)

        if factor is not None:
            logger.debug(f"Exact match found for {activity_type}: {category}")
        else:
            logger.debug(f"No exact match for {activity_type}: {category}")

        return factor

    def suggest_category(
        self,
        activity_type: str,
        category: str,
        threshold: int = DEFAULT_THRESHOLD,
    ) -> Optional[Tuple[str, float]]:
        """
        Find the closest known category using fuzzy matching.

        Args:
            activity_type: Type of activity
            category: Category as submitted
            threshold: Minimum similarity score (0-100)

        Returns:
            Tuple of (category, score) if a match clears the threshold, None otherwise
        """
        choices = categories_for(activity_type)
        if not choices or not category:
            return None

        result = process.extractOne(
            category.lower(),
            choices,
            scorer=fuzz.ratio,
        )

        if result is None:
            return None

        matched_category, score, _ = result

        if score < threshold:
            logger.debug(
                f"Fuzzy match score {score} below threshold {threshold} "
                f"for {activity_type}: {category}"
            )
            return None

        return matched_category, score

    def warn_if_unknown(self, activity_type: str, category: str) -> bool:
        """
        Log a warning when a type/category pair has no emission factor.

        Returns:
            True if the pair is known, False otherwise
        """
        if self.exact_match(activity_type, category) is not None:
            return True

        suggestion = self.suggest_category(activity_type, category)
        if suggestion:
            matched_category, score = suggestion
            logger.warning(
                f"Unknown category '{category}' for {activity_type}; footprint recorded as 0. "
                f"Closest known category is '{matched_category}' ({score:.0f}% match)"
            )
        else:
            logger.warning(
                f"Unknown category '{category}' for {activity_type}; footprint recorded as 0"
            )
        return False
