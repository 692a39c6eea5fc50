from enum import Enum


class Pillar(str, Enum):
    ASSET_QUALITY = "asset_quality"              # Pipeline and asset strength
    MARKET_OUTLOOK = "market_outlook"            # Addressable market and competition
    CAPITAL_INTENSITY = "capital_intensity"      # Development cost burden
    STRATEGIC_FIT = "strategic_fit"              # Alignment with acquirer strategy
    FINANCIAL_READINESS = "financial_readiness"  # Runway and funding position
    REGULATORY_RISK = "regulatory_risk"          # Regulatory pathway risk

    @property
    def wire_name(self) -> str:
        """camelCase key used in dictionary interop (e.g. 'assetQuality')."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)


class IssueSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class InvestmentTier(str, Enum):
    STRONG_CANDIDATE = "strong_candidate"
    MODERATE_OPPORTUNITY = "moderate_opportunity"
    HIGH_RISK = "high_risk"

    @property
    def summary(self) -> str:
        return _TIER_SUMMARIES[self]


_TIER_SUMMARIES = {
    InvestmentTier.STRONG_CANDIDATE: "Strong candidate for partnership or acquisition",
    InvestmentTier.MODERATE_OPPORTUNITY: "Moderate investment opportunity with specific strengths",
    InvestmentTier.HIGH_RISK: "High-risk investment requiring careful evaluation",
}
