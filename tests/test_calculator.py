"""Tests for scoring calculator module."""

import math

import pytest

from mitten_index.models import Category, ScoreFactors
from mitten_index.scoring import aggregate, calculate_mitten_index, categorize, round_score


def factors(temperature=0.0, wind_chill=0.0, humidity=0.0, cloud_cover=0.0, sunlight=0.0):
    return ScoreFactors(
        temperature=temperature,
        wind_chill=wind_chill,
        humidity=humidity,
        cloud_cover=cloud_cover,
        sunlight=sunlight,
    )


class TestAggregate:
    """Tests for aggregate function."""

    def test_all_zero(self):
        """No factors means a zero score."""
        assert aggregate(factors()) == 0

    def test_weights(self):
        """Each factor carries its documented weight."""
        assert aggregate(factors(temperature=100)) == pytest.approx(40)
        assert aggregate(factors(wind_chill=100)) == pytest.approx(30)
        assert aggregate(factors(humidity=100)) == pytest.approx(15)
        assert aggregate(factors(cloud_cover=100)) == pytest.approx(10)

    def test_sunlight_is_subtracted(self):
        """A positive sunlight penalty lowers the score."""
        assert aggregate(factors(cloud_cover=100, sunlight=100)) == pytest.approx(5)

    def test_negative_sunlight_raises_score(self):
        """A negative sunlight value adds to the score."""
        assert aggregate(factors(temperature=20, sunlight=-15)) == pytest.approx(8.75)

    def test_theoretical_extremes_stay_in_range(self):
        """The harshest reachable factors land inside [0, 100]."""
        score = aggregate(
            factors(temperature=100, wind_chill=100, humidity=30, cloud_cover=100, sunlight=-15)
        )
        assert score == pytest.approx(85.25)
        assert 0 <= score <= 100

    def test_clamped_at_100(self):
        """Out-of-range factors cannot push the score past 100."""
        assert aggregate(factors(temperature=1000, wind_chill=1000, humidity=1000)) == 100

    def test_clamped_at_0(self):
        """A large sunlight penalty cannot push the score below 0."""
        assert aggregate(factors(sunlight=500)) == 0

    def test_not_rounded(self):
        """The aggregate keeps its fractional part."""
        assert aggregate(factors(cloud_cover=20, sunlight=12.5)) == pytest.approx(1.375)

    def test_nan_passes_through(self):
        """NaN is not clamped into range."""
        assert math.isnan(aggregate(factors(humidity=float("nan"))))


class TestCategorize:
    """Tests for categorize function."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, Category.PLEASANT),
            (19.99, Category.PLEASANT),
            (20.0, Category.CHILLY),
            (39.99, Category.CHILLY),
            (40.0, Category.COLD),
            (59.99, Category.COLD),
            (60.0, Category.BRUTAL),
            (79.99, Category.BRUTAL),
            (80.0, Category.ARCTIC),
            (100, Category.ARCTIC),
        ],
    )
    def test_boundaries_are_half_open(self, score, expected):
        """Each boundary value belongs to the harsher category."""
        assert categorize(score) == expected

    def test_over_100_is_arctic(self):
        """Scores over 100 default to arctic."""
        assert categorize(150) == Category.ARCTIC

    def test_nan_is_arctic(self):
        """NaN matches no threshold and falls through to arctic."""
        assert categorize(float("nan")) == Category.ARCTIC

    def test_category_values(self):
        """Categories serialize as lowercase strings."""
        assert [c.value for c in Category] == ["pleasant", "chilly", "cold", "brutal", "arctic"]


class TestRoundScore:
    """Tests for round_score function."""

    def test_rounds_half_up(self):
        """Halves round up, not to even."""
        assert round_score(12.5) == 13
        assert round_score(0.5) == 1

    def test_rounds_down(self):
        """Below half rounds down."""
        assert round_score(99.4) == 99

    def test_returns_int(self):
        """Rounded scores are ints."""
        assert isinstance(round_score(73.05), int)

    def test_nan_kept(self):
        """NaN is returned unchanged."""
        assert math.isnan(round_score(float("nan")))


class TestCalculateMittenIndex:
    """Tests for calculate_mitten_index function."""

    def test_pleasant_weather(self, pleasant_reading):
        """Mild sunny weather scores low and pleasant."""
        result = calculate_mitten_index(pleasant_reading)

        assert result.score < 30
        assert result.score == 1
        assert result.category == Category.PLEASANT
        assert result.factors.temperature < 30
        assert result.recommendation == "Light jacket or sweater should be fine"

    def test_brutal_cold_weather(self, make_reading):
        """5°F with a strong wind lands in cold or brutal."""
        reading = make_reading(
            temperature_c=-15.0,
            apparent_temperature_c=-25.0,
            wind_speed_kmh=30.0,
            relative_humidity_pct=80.0,
            cloud_cover_pct=90.0,
            solar_radiation_wm2=0.0,
        )
        result = calculate_mitten_index(reading)

        assert result.score > 40
        assert result.category in (Category.COLD, Category.BRUTAL)
        assert result.factors.temperature >= 60
        assert result.factors.wind_chill > 20

    def test_extreme_cold(self, arctic_reading):
        """-22°F with a -58°F wind chill is brutal or arctic."""
        result = calculate_mitten_index(arctic_reading)

        assert result.factors.temperature == 100
        assert result.score > 60
        assert result.score == 73
        assert result.category in (Category.BRUTAL, Category.ARCTIC)
        assert result.recommendation == "Hat, gloves, and scarf required"

    def test_wind_makes_it_worse(self, make_reading):
        """Same 0°C reading, windier one scores strictly higher."""
        windy = make_reading(
            temperature_c=0.0,
            apparent_temperature_c=-15.0,
            wind_speed_kmh=25.0,
            relative_humidity_pct=60.0,
            cloud_cover_pct=50.0,
            solar_radiation_wm2=200.0,
        )
        calm = make_reading(
            temperature_c=0.0,
            apparent_temperature_c=0.0,
            wind_speed_kmh=2.0,
            relative_humidity_pct=60.0,
            cloud_cover_pct=50.0,
            solar_radiation_wm2=200.0,
        )

        windy_result = calculate_mitten_index(windy)
        calm_result = calculate_mitten_index(calm)

        assert windy_result.factors.wind_chill > calm_result.factors.wind_chill
        assert windy_result.score > calm_result.score

    def test_idempotent(self, arctic_reading):
        """Same input, same output."""
        assert calculate_mitten_index(arctic_reading) == calculate_mitten_index(arctic_reading)

    def test_dressing_matches_category(self, arctic_reading):
        """Dressing advice follows the category."""
        result = calculate_mitten_index(arctic_reading)
        assert "Heavy winter coat" in result.dressing.layers

    def test_score_always_in_range(self, make_reading):
        """Scores stay within 0-100 across a sweep of conditions."""
        for temp in range(-50, 40, 5):
            for wind in (0, 20, 60, 120):
                reading = make_reading(
                    temperature_c=temp,
                    apparent_temperature_c=temp - wind / 4,
                    wind_speed_kmh=wind,
                    relative_humidity_pct=100,
                    cloud_cover_pct=100,
                    solar_radiation_wm2=None,
                )
                assert 0 <= calculate_mitten_index(reading).score <= 100

    def test_nan_input_does_not_raise(self, make_reading):
        """NaN humidity propagates to a NaN score instead of crashing."""
        result = calculate_mitten_index(
            make_reading(temperature_c=-10, relative_humidity_pct=float("nan"))
        )

        assert math.isnan(result.score)
        assert result.category == Category.ARCTIC
        assert result.recommendation == "Full winter gear required"

    def test_to_dict(self, pleasant_reading):
        """Results serialize with camelCase factor names."""
        data = calculate_mitten_index(pleasant_reading).to_dict()

        assert data["score"] == 1
        assert data["category"] == "pleasant"
        assert set(data["factors"]) == {"temperature", "windChill", "humidity", "cloudCover", "sunlight"}
        assert data["dressing"]["accessories"] == []
        assert isinstance(data["dressing"]["layers"], list)
