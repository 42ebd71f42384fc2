"""Offline points-of-interest tables used to seed the stop catalog."""

from __future__ import annotations

import copy
import re
from typing import Dict, List, Sequence, Tuple

from tripwright.core.geo import canonical_name, offset_point


def _poi(
    *,
    poi_id: str,
    name: str,
    category: str,
    description: str,
    hours: float,
    cost: float,
    latitude: float,
    longitude: float,
) -> Dict[str, object]:
    return {
        "id": poi_id,
        "name": name,
        "category": category,
        "description": description,
        "duration_hours": hours,
        "cost_usd": cost,
        "latitude": latitude,
        "longitude": longitude,
    }


_POIS: Dict[str, Tuple[Dict[str, object], ...]] = {
    "Tokyo": (
        _poi(poi_id="tokyo-sensoji", name="Senso-ji Temple", category="culture",
             description="Tokyo's oldest temple and the Nakamise shopping street.",
             hours=2.0, cost=0.0, latitude=35.7148, longitude=139.7967),
        _poi(poi_id="tokyo-tsukiji", name="Tsukiji Outer Market", category="food",
             description="Sushi breakfasts, tamagoyaki and street snacks.",
             hours=2.0, cost=35.0, latitude=35.6655, longitude=139.7707),
        _poi(poi_id="tokyo-meiji", name="Meiji Jingu", category="culture",
             description="Forest-wrapped Shinto shrine beside Harajuku.",
             hours=1.5, cost=0.0, latitude=35.6764, longitude=139.6993),
        _poi(poi_id="tokyo-shinjuku-gyoen", name="Shinjuku Gyoen", category="nature",
             description="Landscaped gardens mixing French, English and Japanese styles.",
             hours=2.0, cost=4.0, latitude=35.6852, longitude=139.7100),
        _poi(poi_id="tokyo-teamlab", name="teamLab Planets", category="art",
             description="Immersive digital art installations in Toyosu.",
             hours=2.0, cost=28.0, latitude=35.6491, longitude=139.7898),
        _poi(poi_id="tokyo-shibuya", name="Shibuya Crossing", category="landmark",
             description="The famous scramble and the Shibuya Sky deck.",
             hours=1.5, cost=15.0, latitude=35.6595, longitude=139.7005),
        _poi(poi_id="tokyo-golden-gai", name="Golden Gai", category="nightlife",
             description="Tiny bars packed into six alleys of Shinjuku.",
             hours=2.5, cost=45.0, latitude=35.6938, longitude=139.7046),
        _poi(poi_id="tokyo-ginza", name="Ginza Shopping District", category="shopping",
             description="Flagship department stores and craft boutiques.",
             hours=2.0, cost=60.0, latitude=35.6717, longitude=139.7650),
        _poi(poi_id="tokyo-ueno", name="Ueno Park & Tokyo National Museum", category="culture",
             description="Museums, a zoo and lotus ponds in one park.",
             hours=3.0, cost=8.0, latitude=35.7188, longitude=139.7765),
        _poi(poi_id="tokyo-akihabara", name="Akihabara", category="shopping",
             description="Electronics, anime shops and retro arcades.",
             hours=2.0, cost=40.0, latitude=35.7023, longitude=139.7745),
        _poi(poi_id="tokyo-omoide", name="Omoide Yokocho", category="food",
             description="Yakitori stalls under the railway tracks.",
             hours=1.5, cost=30.0, latitude=35.6930, longitude=139.6995),
        _poi(poi_id="tokyo-odaiba", name="Odaiba Seaside Park", category="nature",
             description="Bayfront boardwalk with Rainbow Bridge views.",
             hours=2.0, cost=0.0, latitude=35.6298, longitude=139.7752),
    ),
    "Kyoto": (
        _poi(poi_id="kyoto-fushimi-inari", name="Fushimi Inari Taisha", category="culture",
             description="Thousands of vermilion torii gates up Mount Inari.",
             hours=2.5, cost=0.0, latitude=34.9671, longitude=135.7727),
        _poi(poi_id="kyoto-arashiyama", name="Arashiyama Bamboo Grove", category="nature",
             description="Towering bamboo paths on the western edge of the city.",
             hours=2.0, cost=0.0, latitude=35.0094, longitude=135.6668),
        _poi(poi_id="kyoto-kinkakuji", name="Kinkaku-ji", category="culture",
             description="The Golden Pavilion reflected in its mirror pond.",
             hours=1.5, cost=4.0, latitude=35.0394, longitude=135.7292),
        _poi(poi_id="kyoto-nishiki", name="Nishiki Market", category="food",
             description="Narrow covered market known as Kyoto's kitchen.",
             hours=1.5, cost=25.0, latitude=35.0050, longitude=135.7649),
        _poi(poi_id="kyoto-gion", name="Gion & Hanamikoji", category="nightlife",
             description="Lantern-lit teahouse streets at dusk.",
             hours=2.0, cost=40.0, latitude=35.0037, longitude=135.7750),
        _poi(poi_id="kyoto-kiyomizu", name="Kiyomizu-dera", category="culture",
             description="Wooden stage temple overlooking the city.",
             hours=2.0, cost=4.0, latitude=34.9949, longitude=135.7850),
        _poi(poi_id="kyoto-philosophers-path", name="Philosopher's Path", category="nature",
             description="Canal-side walk lined with cherry trees.",
             hours=1.5, cost=0.0, latitude=35.0268, longitude=135.7946),
        _poi(poi_id="kyoto-kaiseki", name="Pontocho Kaiseki Dinner", category="food",
             description="Seasonal multi-course dinner in Pontocho alley.",
             hours=2.0, cost=90.0, latitude=35.0082, longitude=135.7698),
        _poi(poi_id="kyoto-museum", name="Kyoto National Museum", category="art",
             description="Buddhist sculpture and classical painting collections.",
             hours=2.0, cost=6.0, latitude=34.9899, longitude=135.7731),
    ),
    "Paris": (
        _poi(poi_id="paris-louvre", name="Musée du Louvre", category="art",
             description="From the Mona Lisa to the Winged Victory.",
             hours=3.0, cost=22.0, latitude=48.8606, longitude=2.3376),
        _poi(poi_id="paris-eiffel", name="Eiffel Tower", category="landmark",
             description="Summit lift with views across the Seine.",
             hours=2.0, cost=30.0, latitude=48.8584, longitude=2.2945),
        _poi(poi_id="paris-orsay", name="Musée d'Orsay", category="art",
             description="Impressionist masterpieces in a Beaux-Arts station.",
             hours=2.5, cost=16.0, latitude=48.8600, longitude=2.3266),
        _poi(poi_id="paris-montmartre", name="Montmartre & Sacré-Cœur", category="culture",
             description="Hilltop basilica and painters of Place du Tertre.",
             hours=2.0, cost=0.0, latitude=48.8867, longitude=2.3431),
        _poi(poi_id="paris-marais", name="Le Marais Food Walk", category="food",
             description="Falafel on Rue des Rosiers and Marché des Enfants Rouges.",
             hours=2.0, cost=35.0, latitude=48.8575, longitude=2.3620),
        _poi(poi_id="paris-luxembourg", name="Jardin du Luxembourg", category="nature",
             description="Palace gardens, fountains and chess players.",
             hours=1.5, cost=0.0, latitude=48.8462, longitude=2.3372),
        _poi(poi_id="paris-notre-dame", name="Île de la Cité", category="culture",
             description="Notre-Dame and the stained glass of Sainte-Chapelle.",
             hours=2.0, cost=13.0, latitude=48.8530, longitude=2.3499),
        _poi(poi_id="paris-galeries", name="Galeries Lafayette", category="shopping",
             description="Art nouveau dome and rooftop terrace.",
             hours=1.5, cost=50.0, latitude=48.8738, longitude=2.3320),
        _poi(poi_id="paris-pigalle", name="Pigalle Cocktail Bars", category="nightlife",
             description="Speakeasies and cabaret around South Pigalle.",
             hours=2.5, cost=55.0, latitude=48.8822, longitude=2.3375),
        _poi(poi_id="paris-canal", name="Canal Saint-Martin", category="nature",
             description="Iron footbridges and picnic spots on the quays.",
             hours=1.5, cost=0.0, latitude=48.8718, longitude=2.3657),
    ),
    "London": (
        _poi(poi_id="london-british-museum", name="British Museum", category="culture",
             description="Rosetta Stone, Parthenon sculptures and the Great Court.",
             hours=3.0, cost=0.0, latitude=51.5194, longitude=-0.1270),
        _poi(poi_id="london-tower", name="Tower of London", category="culture",
             description="Crown Jewels and a thousand years of history.",
             hours=2.5, cost=40.0, latitude=51.5081, longitude=-0.0759),
        _poi(poi_id="london-borough-market", name="Borough Market", category="food",
             description="Cheese, oysters and street food under the railway arches.",
             hours=1.5, cost=25.0, latitude=51.5055, longitude=-0.0910),
        _poi(poi_id="london-tate-modern", name="Tate Modern", category="art",
             description="Modern art in the former Bankside power station.",
             hours=2.0, cost=0.0, latitude=51.5076, longitude=-0.0994),
        _poi(poi_id="london-hyde-park", name="Hyde Park", category="nature",
             description="Serpentine lake, Speakers' Corner and rose gardens.",
             hours=1.5, cost=0.0, latitude=51.5073, longitude=-0.1657),
        _poi(poi_id="london-westminster", name="Westminster & Big Ben", category="landmark",
             description="Parliament, the Abbey and the riverside.",
             hours=2.0, cost=30.0, latitude=51.4995, longitude=-0.1248),
        _poi(poi_id="london-soho", name="Soho Evenings", category="nightlife",
             description="Theatre district bars and late jazz clubs.",
             hours=2.5, cost=50.0, latitude=51.5136, longitude=-0.1365),
        _poi(poi_id="london-covent-garden", name="Covent Garden", category="shopping",
             description="Market halls, street performers and boutiques.",
             hours=1.5, cost=35.0, latitude=51.5117, longitude=-0.1240),
        _poi(poi_id="london-camden", name="Camden Market", category="shopping",
             description="Vintage stalls and global street food by the lock.",
             hours=2.0, cost=30.0, latitude=51.5414, longitude=-0.1460),
        _poi(poi_id="london-greenwich", name="Greenwich Park", category="nature",
             description="Royal Observatory and the prime meridian.",
             hours=2.5, cost=22.0, latitude=51.4769, longitude=-0.0005),
    ),
    "New York": (
        _poi(poi_id="nyc-met", name="The Met", category="art",
             description="Five thousand years of art on Fifth Avenue.",
             hours=3.0, cost=30.0, latitude=40.7794, longitude=-73.9632),
        _poi(poi_id="nyc-central-park", name="Central Park", category="nature",
             description="Bethesda Terrace, Bow Bridge and the Ramble.",
             hours=2.0, cost=0.0, latitude=40.7829, longitude=-73.9654),
        _poi(poi_id="nyc-high-line", name="The High Line", category="nature",
             description="Elevated park walk above the Meatpacking District.",
             hours=1.5, cost=0.0, latitude=40.7480, longitude=-74.0048),
        _poi(poi_id="nyc-chelsea-market", name="Chelsea Market", category="food",
             description="Tacos, lobster rolls and bakeries in an old biscuit factory.",
             hours=1.5, cost=30.0, latitude=40.7424, longitude=-74.0060),
        _poi(poi_id="nyc-statue", name="Statue of Liberty & Ellis Island", category="landmark",
             description="Ferry out to Liberty Island and the immigration museum.",
             hours=3.5, cost=25.0, latitude=40.6892, longitude=-74.0445),
        _poi(poi_id="nyc-moma", name="MoMA", category="art",
             description="Van Gogh, Warhol and the sculpture garden.",
             hours=2.5, cost=30.0, latitude=40.7614, longitude=-73.9776),
        _poi(poi_id="nyc-brooklyn-bridge", name="Brooklyn Bridge & DUMBO", category="landmark",
             description="Walk the bridge and catch the Manhattan skyline.",
             hours=2.0, cost=0.0, latitude=40.7033, longitude=-73.9881),
        _poi(poi_id="nyc-village", name="Greenwich Village Jazz", category="nightlife",
             description="Basement jazz clubs around Washington Square.",
             hours=2.5, cost=45.0, latitude=40.7308, longitude=-73.9973),
        _poi(poi_id="nyc-soho", name="SoHo Boutiques", category="shopping",
             description="Cast-iron facades and designer storefronts.",
             hours=2.0, cost=60.0, latitude=40.7233, longitude=-74.0030),
        _poi(poi_id="nyc-chinatown", name="Chinatown Dumplings", category="food",
             description="Soup dumplings and bakeries along Mott Street.",
             hours=1.5, cost=20.0, latitude=40.7158, longitude=-73.9970),
    ),
    "New Delhi": (
        _poi(poi_id="delhi-red-fort", name="Red Fort", category="culture",
             description="Mughal sandstone fortress in Old Delhi.",
             hours=2.0, cost=8.0, latitude=28.6562, longitude=77.2410),
        _poi(poi_id="delhi-chandni-chowk", name="Chandni Chowk Food Trail", category="food",
             description="Parathas, jalebis and chaat in the old bazaar.",
             hours=2.0, cost=15.0, latitude=28.6506, longitude=77.2303),
        _poi(poi_id="delhi-humayun", name="Humayun's Tomb", category="culture",
             description="Garden tomb that inspired the Taj Mahal.",
             hours=1.5, cost=8.0, latitude=28.5933, longitude=77.2507),
        _poi(poi_id="delhi-qutub", name="Qutub Minar", category="culture",
             description="Twelfth-century victory tower and ruins.",
             hours=1.5, cost=8.0, latitude=28.5245, longitude=77.1855),
        _poi(poi_id="delhi-lodhi", name="Lodhi Garden", category="nature",
             description="Tombs and walking paths in a leafy park.",
             hours=1.5, cost=0.0, latitude=28.5931, longitude=77.2197),
        _poi(poi_id="delhi-india-gate", name="India Gate & Kartavya Path", category="landmark",
             description="War memorial and the ceremonial boulevard.",
             hours=1.0, cost=0.0, latitude=28.6129, longitude=77.2295),
        _poi(poi_id="delhi-hauz-khas", name="Hauz Khas Village", category="nightlife",
             description="Lakeside ruins and rooftop bars.",
             hours=2.5, cost=35.0, latitude=28.5535, longitude=77.1940),
        _poi(poi_id="delhi-dilli-haat", name="Dilli Haat", category="shopping",
             description="Craft stalls from every Indian state.",
             hours=1.5, cost=20.0, latitude=28.5733, longitude=77.2075),
        _poi(poi_id="delhi-kiran-nadar", name="Kiran Nadar Museum of Art", category="art",
             description="Modern and contemporary South Asian art.",
             hours=1.5, cost=0.0, latitude=28.5355, longitude=77.2410),
        _poi(poi_id="delhi-lotus", name="Lotus Temple", category="culture",
             description="Bahá'í house of worship shaped like a lotus flower.",
             hours=1.0, cost=0.0, latitude=28.5535, longitude=77.2588),
    ),
}

# Generic templates for synthesised stops around unknown or thin destinations.
_SYNTHETIC_TEMPLATES: Sequence[Tuple[str, str, str, float, float]] = (
    ("Old Town Walk", "culture", "Self-guided walk through the historic centre.", 2.0, 0.0),
    ("Central Market", "food", "Local produce and street-food counters.", 1.5, 20.0),
    ("City Park", "nature", "Green space for a slow stroll.", 1.5, 0.0),
    ("Main Museum", "art", "The city's principal art and history collection.", 2.0, 15.0),
    ("Riverside Promenade", "nature", "Waterfront path with viewpoints.", 1.5, 0.0),
    ("Shopping Quarter", "shopping", "Independent shops and local crafts.", 2.0, 40.0),
    ("Evening Bar Street", "nightlife", "Where locals gather after dark.", 2.0, 35.0),
    ("Landmark Viewpoint", "landmark", "Panorama over the skyline.", 1.0, 10.0),
)

_RING_RADII_KM: Sequence[float] = (2.5, 5.0, 8.0, 12.0)


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-") or "place"


def known_pois(destination: str) -> List[Dict[str, object]]:
    """Return deep copies of the curated POIs for ``destination`` (may be empty)."""

    key = canonical_name(destination)
    if key is None:
        return []
    return copy.deepcopy(list(_POIS.get(key, ())))


def synthesise_pois(
    destination: str, center: Tuple[float, float], count: int, *, start: int = 0
) -> List[Dict[str, object]]:
    """Generate ``count`` deterministic stops on rings around ``center``."""

    slug = _slug(destination)
    results: List[Dict[str, object]] = []
    for offset in range(count):
        index = start + offset
        name, category, description, hours, cost = _SYNTHETIC_TEMPLATES[
            index % len(_SYNTHETIC_TEMPLATES)
        ]
        ring = index // len(_SYNTHETIC_TEMPLATES)
        radius = _RING_RADII_KM[ring % len(_RING_RADII_KM)] * (1 + ring // len(_RING_RADII_KM))
        bearing = (index * 360.0 / len(_SYNTHETIC_TEMPLATES) + ring * 22.5) % 360.0
        latitude, longitude = offset_point(center, bearing, radius)
        label = name if ring == 0 else f"{name} {ring + 1}"
        results.append(
            _poi(
                poi_id=f"{slug}-{_slug(label)}",
                name=f"{destination} {label}",
                category=category,
                description=description,
                hours=hours,
                cost=cost,
                latitude=latitude,
                longitude=longitude,
            )
        )
    return results


__all__ = ["known_pois", "synthesise_pois"]
