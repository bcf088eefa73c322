"""
Catalogue of bodies shown in the solar system view.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class PlanetStats:
    """Fact sheet shown in the planet info panel."""
    diameter: str
    temperature: str
    day_length: str
    orbit_period: str
    mass: Optional[str] = None
    gravity: Optional[str] = None
    moon_count: Optional[str] = None
    fun_fact: Optional[str] = None


@dataclass(frozen=True)
class PlanetConfig:
    """Static description of one body."""
    name: str
    color: str
    radius: float
    distance: float  # from the sun, or from the parent body for moons
    speed: float  # orbit speed
    description: str
    stats: Optional[PlanetStats] = None
    moons: List["PlanetConfig"] = field(default_factory=list)

    def stats_line(self) -> str:
        """One-line summary for the HUD, empty when there are no stats."""
        if self.stats is None:
            return ""
        return (f"Diameter {self.stats.diameter} | Temp {self.stats.temperature} | "
                f"Day {self.stats.day_length} | Orbit {self.stats.orbit_period}")


MOON = PlanetConfig("MOON", "#DDDDDD", 0.27, 2.0, 2.0, "Luna - Our Natural Satellite")

PLANETS: List[PlanetConfig] = [
    PlanetConfig(
        "SUN", "#ffaa00", 5.0, 0.0, 0.0, "The Star at the Center",
        stats=PlanetStats(
            "1,392,700 km", "5,500°C (surface)", "27 Earth days", "N/A",
            mass="1.989 × 10³⁰ kg", gravity="274 m/s²", moon_count="0",
            fun_fact="The Sun contains 99.86% of the mass in our Solar System.",
        ),
    ),
    PlanetConfig(
        "MERCURY", "#8C7853", 0.6, 8.0, 0.8, "The Swift Messenger",
        stats=PlanetStats(
            "4,879 km", "-173°C to 427°C", "59 Earth days", "88 days",
            mass="3.285 × 10²³ kg", gravity="3.7 m/s²", moon_count="0",
            fun_fact="Mercury swings over 600°C between day and night.",
        ),
    ),
    PlanetConfig(
        "VENUS", "#FFC649", 0.9, 12.0, 0.6, "The Morning Star",
        stats=PlanetStats(
            "12,104 km", "464°C (hottest planet)", "243 Earth days", "225 days",
            mass="4.867 × 10²⁴ kg", gravity="8.87 m/s²", moon_count="0",
            fun_fact="Venus rotates backwards and its day is longer than its year.",
        ),
    ),
    PlanetConfig(
        "EARTH", "#4b9cd3", 1.0, 17.0, 0.5, "Our Blue Marble",
        stats=PlanetStats(
            "12,742 km", "15°C (average)", "24 hours", "365.25 days",
            mass="5.972 × 10²⁴ kg", gravity="9.81 m/s²", moon_count="1 (Luna)",
            fun_fact="Earth is the only known planet with liquid surface water.",
        ),
        moons=[MOON],
    ),
    PlanetConfig(
        "MARS", "#CD5C5C", 0.7, 23.0, 0.4, "The Red Planet",
        stats=PlanetStats(
            "6,779 km", "-65°C (avg)", "24h 37m", "687 days",
            mass="6.39 × 10²³ kg", gravity="3.71 m/s²", moon_count="2 (Phobos & Deimos)",
            fun_fact="Olympus Mons is three times taller than Mount Everest.",
        ),
    ),
    PlanetConfig(
        "JUPITER", "#C88B3A", 3.5, 34.0, 0.2, "King of Planets",
        stats=PlanetStats(
            "139,820 km", "-110°C (cloud tops)", "9h 56m", "12 years",
            mass="1.898 × 10²⁷ kg", gravity="24.79 m/s²", moon_count="95+",
            fun_fact="The Great Red Spot has raged for over 400 years.",
        ),
    ),
    PlanetConfig(
        "SATURN", "#FAD5A5", 3.0, 48.0, 0.15, "Lord of the Rings",
        stats=PlanetStats(
            "116,460 km", "-140°C (cloud tops)", "10h 42m", "29.5 years",
            mass="5.683 × 10²⁶ kg", gravity="10.44 m/s²", moon_count="146+",
            fun_fact="Its rings could fit 6 Earths across but are only 10 m thick.",
        ),
    ),
    PlanetConfig(
        "URANUS", "#4FD0E7", 2.0, 60.0, 0.1, "The Sideways Planet",
        stats=PlanetStats(
            "50,724 km", "-195°C", "17h 14m", "84 years",
            mass="8.681 × 10²⁵ kg", gravity="8.69 m/s²", moon_count="28",
            fun_fact="Uranus rotates on its side at a 98° tilt.",
        ),
    ),
    PlanetConfig(
        "NEPTUNE", "#4169E1", 1.9, 72.0, 0.08, "The Windiest Planet",
        stats=PlanetStats(
            "49,244 km", "-200°C", "16h 6m", "165 years",
            mass="1.024 × 10²⁶ kg", gravity="11.15 m/s²", moon_count="16",
            fun_fact="Neptune's winds reach 2,100 km/h.",
        ),
    ),
]

# Bodies the camera cycles through; the sun is skipped
ORBITING_PLANET_INDICES: List[int] = [i for i, p in enumerate(PLANETS) if p.distance > 0]
