from heroviz.procedural.presets import (
    BACKGROUND_VARIANTS,
    HERO_BACKGROUND_PRESETS,
    SLUG_TILE_PRESETS,
    TILE_VARIANTS,
    background_variant_for_route,
    default_intensity_for_route,
    stable_hash,
    tile_variant_for_path,
    tile_variant_for_slug,
)
from heroviz.procedural.sdk import IntensityLevel


class TestStableHash:
    def test_known_values(self):
        assert stable_hash("") == 0
        assert stable_hash("a") == 97
        assert stable_hash("ab") == 97 * 31 + 98

    def test_non_negative_on_long_input(self):
        assert stable_hash("/a/very/long/route/" * 50) >= 0


class TestBackgroundRoutes:
    def test_explicit_presets(self):
        assert background_variant_for_route("/") == "growthCurve"
        assert background_variant_for_route("/services/seo") == "growthCurve"
        assert background_variant_for_route("/contact") == "networkSync"

    def test_presets_name_known_variants(self):
        assert set(HERO_BACKGROUND_PRESETS.values()) <= set(BACKGROUND_VARIANTS)

    def test_unmapped_route_is_stable(self):
        route = "/blog/some-post"
        first = background_variant_for_route(route)
        assert first == background_variant_for_route(route)
        assert first == BACKGROUND_VARIANTS[stable_hash(route) % len(BACKGROUND_VARIANTS)]

    def test_empty_route(self):
        assert background_variant_for_route("") == BACKGROUND_VARIANTS[0]
        assert background_variant_for_route(None) == BACKGROUND_VARIANTS[0]


class TestTileSlugs:
    def test_explicit_presets(self):
        assert tile_variant_for_slug("seo") == "seoUplift"
        assert tile_variant_for_slug("martech") == "martechSync"
        assert tile_variant_for_slug("social-media") == "socialOrbit"

    def test_presets_name_known_variants(self):
        assert set(SLUG_TILE_PRESETS.values()) <= set(TILE_VARIANTS)

    def test_unmapped_slug_is_stable(self):
        slug = "brand-new-service"
        first = tile_variant_for_slug(slug)
        assert first in TILE_VARIANTS
        assert first == tile_variant_for_slug(slug)

    def test_path_uses_last_segment(self):
        assert tile_variant_for_path("/services/seo/") == "seoUplift"
        assert tile_variant_for_path("/expertise/demand-generation") == "funnelStages"


def test_default_intensity_is_medium():
    assert default_intensity_for_route("/") == IntensityLevel.MEDIUM
    assert default_intensity_for_route("/anything") == IntensityLevel.MEDIUM
