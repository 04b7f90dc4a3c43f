"""
Demo data for local development and the admin "reseed" button.

Creates three demo accounts (admin / agent / user), one location per city in
the municipality map, a handful of listings per location, neighborhoods,
blog posts, footer links and site settings.
"""

from __future__ import annotations

import logging
import random
from decimal import Decimal

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.blog.models import Post
from apps.content.models import FooterContent
from apps.favorites.models import Favorite
from apps.messaging.models import Message
from apps.neighborhoods.models import Neighborhood
from apps.properties.models import Location, Property
from apps.properties.municipalities import MUNICIPALITY_CODES
from apps.site_settings.serializers import SETTINGS_SERIALIZERS
from apps.site_settings.services import get_settings, save_settings
from .models import SystemLog
from .services import record_event

logger = logging.getLogger(__name__)

User = get_user_model()

DEMO_USERS = [
    {
        "email": "admin@homeharbor.com",
        "username": "admin",
        "name": "Admin User",
        "role": User.RoleChoices.ADMIN,
        "password": "admin123",
        "is_staff": True,
        "photo_url": "https://randomuser.me/api/portraits/men/1.jpg",
    },
    {
        "email": "agent@homeharbor.com",
        "username": "agent",
        "name": "Agent User",
        "role": User.RoleChoices.AGENT,
        "password": "agent123",
        "is_staff": False,
        "photo_url": "https://randomuser.me/api/portraits/men/3.jpg",
    },
    {
        "email": "demouser@homeharbor.com",
        "username": "demouser",
        "name": "Demo User",
        "role": User.RoleChoices.USER,
        "password": "password123",
        "is_staff": False,
        "photo_url": "https://randomuser.me/api/portraits/women/2.jpg",
    },
]

# Центры городов из карты муниципалитетов.
CITY_COORDINATES: dict[str, tuple[float, float]] = {
    "Helsinki": (60.1699, 24.9384),
    "Espoo": (60.2055, 24.6559),
    "Tampere": (61.4978, 23.7610),
    "Vantaa": (60.2934, 25.0378),
    "Oulu": (65.0121, 25.4651),
    "Turku": (60.4518, 22.2666),
    "Jyväskylä": (62.2426, 25.7473),
    "Lahti": (60.9827, 25.6612),
    "Kuopio": (62.8924, 27.6770),
    "Pori": (61.4851, 21.7974),
    "Kouvola": (60.8681, 26.7042),
    "Joensuu": (62.6010, 29.7636),
    "Vaasa": (63.0951, 21.6165),
    "Lappeenranta": (61.0587, 28.1887),
    "Hämeenlinna": (60.9959, 24.4643),
    "Rovaniemi": (66.5039, 25.7294),
    "Seinäjoki": (62.7903, 22.8403),
    "Mikkeli": (61.6886, 27.2723),
    "Kotka": (60.4664, 26.9458),
    "Salo": (60.3845, 23.1289),
}

LOCATION_IMAGE = "https://images.unsplash.com/photo-1464983953574-0892a716854b?auto=format&fit=crop&w=800&q=80"

LISTING_MIX = [
    (Property.PropertyType.APARTMENT, Property.ListingType.BUY),
    (Property.PropertyType.APARTMENT, Property.ListingType.RENT),
    (Property.PropertyType.HOUSE, Property.ListingType.BUY),
    (Property.PropertyType.STUDIO, Property.ListingType.RENT),
    (Property.PropertyType.TOWNHOUSE, Property.ListingType.BUY),
]

FEATURE_POOL = ["Balcony", "Elevator", "Parking", "Sauna", "Garden", "Dishwasher"]

NEIGHBORHOODS = [
    {
        "name": "Punavuori",
        "city": "Helsinki",
        "description": "Trendy, bohemian neighborhood in Helsinki.",
        "average_price": Decimal("480000"),
        "population_density": 9000,
        "walk_score": 97,
        "transit_score": 94,
        "latitude": Decimal("60.160200"),
        "longitude": Decimal("24.939500"),
    },
    {
        "name": "Tuira",
        "city": "Oulu",
        "description": "Riverside district next to the Oulu city centre.",
        "average_price": Decimal("210000"),
        "population_density": 4200,
        "walk_score": 88,
        "transit_score": 72,
        "latitude": Decimal("65.023400"),
        "longitude": Decimal("25.458000"),
    },
    {
        "name": "Tapiola",
        "city": "Espoo",
        "description": "Garden city with modernist architecture and a metro station.",
        "average_price": Decimal("390000"),
        "population_density": 5100,
        "walk_score": 85,
        "transit_score": 90,
        "latitude": Decimal("60.175000"),
        "longitude": Decimal("24.805000"),
    },
]

POSTS = [
    {
        "title": "Buying a Home in Finland: What to Know",
        "slug": "buying-home-finland",
        "excerpt": "A guide to buying property in Finland for locals and expats.",
        "content": (
            "Finland offers a stable and transparent real estate market. Housing companies, "
            "transfer tax and the role of the property manager are the first things to learn."
        ),
        "category": "Buying",
        "tags": "Finland,Buying,Guide",
        "read_time_minutes": 5,
    },
    {
        "title": "Oulu Neighborhoods: Where to Live",
        "slug": "oulu-neighborhoods",
        "excerpt": "Explore the best areas to live in Oulu.",
        "content": (
            "Oulu is a northern technology hub. Tuira, Toppila and Kaakkuri each offer a "
            "different balance of price, services and distance to the city centre."
        ),
        "category": "Neighborhoods",
        "tags": "Oulu,Neighborhoods,Guide",
        "read_time_minutes": 4,
    },
]

FOOTER_LINKS = [
    ("company", "About Us", "/about", "ri-information-line", False),
    ("company", "Careers", "/careers", "ri-briefcase-line", False),
    ("resources", "Blog", "/blog", "ri-article-line", False),
    ("resources", "FAQ", "/faq", "ri-question-line", False),
    ("legal", "Privacy Policy", "/privacy-policy", "ri-lock-line", False),
    ("legal", "Terms of Service", "/terms-of-service", "ri-file-list-2-line", False),
    ("social", "Facebook", "https://facebook.com", "ri-facebook-fill", True),
    ("social", "Twitter", "https://twitter.com", "ri-twitter-fill", True),
]


def _clear_existing() -> None:
    Message.objects.all().delete()
    Favorite.objects.all().delete()
    Property.objects.all().delete()
    Location.objects.all().delete()
    Neighborhood.objects.all().delete()
    Post.objects.all().delete()
    FooterContent.objects.all().delete()


def _seed_users() -> dict[str, User]:
    users = {}
    for spec in DEMO_USERS:
        data = dict(spec)
        password = data.pop("password")
        email = data.pop("email")
        key = data["username"]
        if User.objects.filter(username__iexact=key).exclude(email__iexact=email).exists():
            data.pop("username")
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            user = User.objects.create_user(email=email, password=password, **data)
        else:
            for field, value in data.items():
                setattr(user, field, value)
            user.set_password(password)
            user.save()
        users[key] = user
    return users


def _seed_locations() -> list[Location]:
    locations = []
    for city, (lat, lng) in CITY_COORDINATES.items():
        location, _ = Location.objects.update_or_create(
            name=city,
            city=city,
            defaults={
                "country": "Finland",
                "image": LOCATION_IMAGE,
                "description": f"Homes for sale and rent in {city}.",
                "latitude": Decimal(str(lat)),
                "longitude": Decimal(str(lng)),
                "municipality_code": MUNICIPALITY_CODES[city],
                "active": True,
            },
        )
        locations.append(location)
    return locations


def _seed_properties(locations: list[Location], agent, admin, rng: random.Random) -> int:
    created = 0
    number = 1
    for location in locations:
        for property_type, listing_type in LISTING_MIX:
            owner = agent if number % 2 == 0 else admin
            is_rent = listing_type == Property.ListingType.RENT
            price = rng.randint(600, 2500) if is_rent else rng.randint(120, 700) * 1000
            Property.objects.create(
                owner=owner,
                title=f"{property_type.label} for {str(listing_type.label).lower()} in {location.city}",
                description=f"A nice {str(property_type.label).lower()} in {location.city}.",
                price=Decimal(price),
                address=f"{number} Main Street, {location.city}",
                city=location.city,
                area=rng.randint(25, 200),
                bedrooms=0 if property_type == Property.PropertyType.STUDIO else rng.randint(1, 4),
                bathrooms=rng.randint(1, 2),
                property_type=property_type,
                listing_type=listing_type,
                features=rng.sample(FEATURE_POOL, 3),
                images=[location.image],
                latitude=location.latitude + Decimal(str(round(rng.uniform(-0.01, 0.01), 6))),
                longitude=location.longitude + Decimal(str(round(rng.uniform(-0.01, 0.01), 6))),
                featured=number % 5 == 0,
                verified=number % 3 == 0,
                transaction_type=Property.TransactionType.NEW,
                property_ownership=Property.Ownership.FREEHOLD,
                heating_available=True,
                owner_details={"name": owner.display_name, "contact": owner.email},
            )
            created += 1
            number += 1
    return created


def _seed_content(author) -> None:
    now = timezone.now()
    for data in NEIGHBORHOODS:
        Neighborhood.objects.update_or_create(name=data["name"], city=data["city"], defaults=data)
    for data in POSTS:
        Post.objects.update_or_create(
            slug=data["slug"],
            defaults={
                **data,
                "author": author,
                "author_name": author.display_name,
                "is_published": True,
                "published_at": now,
            },
        )
    for position, (section, title, link, icon, new_tab) in enumerate(FOOTER_LINKS, start=1):
        FooterContent.objects.update_or_create(
            section=section,
            title=title,
            defaults={"link": link, "icon": icon, "position": position, "open_in_new_tab": new_tab},
        )
    for key in SETTINGS_SERIALIZERS:
        save_settings(key, get_settings(key))


@transaction.atomic
def seed_demo_data(clear_existing: bool = True, seed: int = 42, actor=None) -> dict[str, int]:
    """
    Заполняет базу демо-данными.

    Демо-аккаунты обновляются по email, остальные пользователи не трогаются.
    Возвращает количество созданных записей по типам.
    """
    if clear_existing:
        _clear_existing()

    rng = random.Random(seed)
    users = _seed_users()
    locations = _seed_locations()
    properties = _seed_properties(
        locations, users["agent"], users["admin"], rng
    )
    _seed_content(users["agent"])

    summary = {
        "users": len(users),
        "locations": len(locations),
        "properties": properties,
        "neighborhoods": Neighborhood.objects.count(),
        "posts": Post.objects.count(),
        "footer_links": FooterContent.objects.count(),
    }
    record_event(
        "Database seeded with demo data",
        source="database",
        level=SystemLog.Level.INFO,
        details={**summary, "clear_existing": clear_existing, "actor_id": getattr(actor, "id", None)},
    )
    return summary
