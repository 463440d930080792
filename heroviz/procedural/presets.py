"""
Variant presets: which style a route or content slug gets.

Explicit mappings win; anything unmapped still resolves to a stable variant
(hash of the route for backgrounds, a slug-seeded draw for tiles) so a page
keeps its look across visits.
"""

from typing import Dict

from .intensity import DEFAULT_INTENSITY
from .prng import create_seeded_random
from .registry import available_variants
from .sdk import Family, IntensityLevel

BACKGROUND_VARIANTS = tuple(available_variants(Family.BACKGROUND))
TILE_VARIANTS = tuple(available_variants(Family.TILE))

HERO_BACKGROUND_PRESETS: Dict[str, str] = {
    "/": "growthCurve",
    "/expertise": "neuralFlow",
    "/expertise/strategy-insights": "branchingPaths",
    "/expertise/demand-growth": "funnelStages",
    "/expertise/content-engagement": "contentFlow",
    "/expertise/systems-operations": "networkSync",
    "/expertise/strategy": "branchingPaths",
    "/expertise/analytics": "dashboardPulse",
    "/expertise/automation": "neuralFlow",
    "/expertise/optimization": "growthCurve",
    "/industries": "orbitingNodes",
    "/case-studies": "dashboardPulse",
    "/projects": "dashboardPulse",
    "/services/content-marketing": "contentFlow",
    "/services/email": "contentFlow",
    "/services/omnichannel": "contentFlow",
    "/services/social-media": "contentFlow",
    "/services/video-creative": "contentFlow",
    "/services/demand-generation": "funnelStages",
    "/services/paid-advertising": "funnelStages",
    "/services/events": "funnelStages",
    "/services/seo": "growthCurve",
    "/services/growth-marketing": "growthCurve",
    "/services/abm": "orbitingNodes",
    "/services/customer-marketing": "orbitingNodes",
    "/services/lifecycle-marketing": "orbitingNodes",
    "/services/cx": "dashboardPulse",
    "/services/customer-experience": "dashboardPulse",
    "/services/market-research": "dashboardPulse",
    "/services/ai": "neuralFlow",
    "/services/marketing-automation": "neuralFlow",
    "/services/marketing-operations": "networkSync",
    "/services/martech": "networkSync",
    "/services/sales-enablement": "networkSync",
    "/about": "branchingPaths",
    "/contact": "networkSync",
    "/resume": "growthCurve",
}

# Slug groups per tile style; flattened into SLUG_TILE_PRESETS below.
_TILE_SLUGS = {
    "contentFlow": (
        "content-marketing", "content-strategy", "content-operations",
        "content-strategy-systems",
    ),
    "emailBranching": (
        "email-marketing", "lifecycle-marketing", "email-operations", "marketing-automation",
    ),
    "omnichannelNodes": (
        "omnichannel-marketing", "omnichannel", "integrated-campaigns", "customer-journey",
        "channel-partner-marketing", "customer-experience", "customer-experience-cx",
        "customer-marketing",
    ),
    "socialOrbit": (
        "social-media", "social-media-marketing", "community-marketing", "influencer-marketing",
    ),
    "videoHeatmap": (
        "video-creative", "video-marketing", "youtube-marketing", "creative-services",
    ),
    "funnelStages": (
        "demand-generation", "lead-generation", "pipeline-acceleration",
        "conversion-optimization", "account-based-marketing", "account-based-marketing-abm",
        "event-marketing", "event-field-marketing",
    ),
    "seoUplift": (
        "seo", "organic-search", "content-seo", "technical-seo", "search-engine-optimization",
    ),
    "growthExperiments": (
        "growth-marketing", "experimentation", "cro", "product-led-growth", "a-b-testing",
        "product-marketing", "market-research",
    ),
    "paidRoasFlow": (
        "paid-advertising", "paid-media", "ppc", "performance-marketing", "programmatic",
        "paid-advertising-sem",
    ),
    "martechSync": (
        "marketing-operations", "martech", "marketing-technology", "crm-integration",
        "data-integration", "marketing-analytics-reporting", "revenue-operations",
        "sales-enablement-alignment", "ai-in-marketing", "digital-marketing",
        "martech-optimization", "sales-enablement", "data-governance", "bi-data-engineering",
        "attribution-and-measurement",
    ),
}

SLUG_TILE_PRESETS: Dict[str, str] = {
    slug: variant for variant, slugs in _TILE_SLUGS.items() for slug in slugs
}


def stable_hash(text: str) -> int:
    """Non-negative rolling hash (h*31 + c over UTF-16 units, int32 wrap)."""
    h = 0
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        h = ((h << 5) - h + (raw[i] | (raw[i + 1] << 8))) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return abs(h)


def background_variant_for_route(path: str) -> str:
    path = path or ""
    preset = HERO_BACKGROUND_PRESETS.get(path)
    if preset:
        return preset
    return BACKGROUND_VARIANTS[stable_hash(path) % len(BACKGROUND_VARIANTS)]


def tile_variant_for_slug(slug: str) -> str:
    slug = slug or ""
    preset = SLUG_TILE_PRESETS.get(slug)
    if preset:
        return preset
    return create_seeded_random(slug).rand_choice(TILE_VARIANTS)


def tile_variant_for_path(path: str) -> str:
    path = path or ""
    segments = [s for s in path.split("/") if s]
    return tile_variant_for_slug(segments[-1] if segments else path)


def default_intensity_for_route(path: str) -> IntensityLevel:
    return DEFAULT_INTENSITY
