"""
Seed data for the city/activity catalogue and demo trips.
"""
import logging
from datetime import date
from typing import Dict, List, Tuple
from sqlalchemy.orm import Session
from globaltrotters.core.security import get_password_hash
from globaltrotters.models.city import Activity, City
from globaltrotters.models.trip import Trip, TripActivity, TripStatus
from globaltrotters.models.user import User, UserRole, UserStatus

logger = logging.getLogger(__name__)

# name, country, cost_index, popularity, description
CITIES: List[Tuple[str, str, float, int, str]] = [
    ("Paris", "France", 1.4, 98, "The city of light, art and cafés."),
    ("Barcelona", "Spain", 1.1, 92, "Gaudí architecture and Mediterranean beaches."),
    ("Rome", "Italy", 1.2, 94, "Ancient ruins and world-class food."),
    ("Tokyo", "Japan", 1.5, 96, "Neon streets, temples and sushi."),
    ("Bangkok", "Thailand", 0.6, 88, "Street food, markets and golden temples."),
    ("New York", "United States", 1.8, 97, "The city that never sleeps."),
    ("Los Angeles", "United States", 1.6, 85, "Beaches, studios and sunshine."),
    ("Dubai", "United Arab Emirates", 1.7, 86, "Skyscrapers, desert safaris and luxury."),
    ("Sydney", "Australia", 1.5, 84, "Harbour views and surf beaches."),
    ("London", "United Kingdom", 1.7, 95, "Royal history, museums and theatre."),
]

# city name -> [(name, category, estimated_cost, duration_hours, description)]
ACTIVITIES: Dict[str, List[Tuple[str, str, float, float, str]]] = {
    "Paris": [
        ("Eiffel Tower Summit", "Sightseeing", 35, 2, "Ride to the top of the tower."),
        ("Louvre Museum", "Culture", 22, 4, "Home of the Mona Lisa."),
        ("Seine River Cruise", "Sightseeing", 18, 1, "Evening boat tour along the Seine."),
        ("Montmartre Food Walk", "Food", 80, 3, "Cheese, crêpes and wine tasting."),
    ],
    "Barcelona": [
        ("Sagrada Família", "Culture", 33, 2, "Gaudí's unfinished basilica."),
        ("Park Güell", "Sightseeing", 10, 2, "Mosaic terraces over the city."),
        ("Tapas Tour", "Food", 65, 3, "Evening tapas crawl in El Born."),
    ],
    "Rome": [
        ("Colosseum Tour", "Culture", 25, 3, "Guided tour of the arena."),
        ("Vatican Museums", "Culture", 30, 4, "Including the Sistine Chapel."),
        ("Trastevere Pasta Class", "Food", 70, 3, "Make fresh pasta with a local chef."),
    ],
    "Tokyo": [
        ("Tsukiji Outer Market", "Food", 40, 2, "Street food breakfast."),
        ("Senso-ji Temple", "Culture", 0, 1, "Tokyo's oldest temple."),
        ("Shibuya Sky", "Sightseeing", 15, 1, "Rooftop view over the crossing."),
    ],
    "Bangkok": [
        ("Grand Palace", "Culture", 15, 3, "Royal palace and Emerald Buddha."),
        ("Floating Market", "Shopping", 20, 4, "Boat market day trip."),
        ("Thai Cooking Class", "Food", 35, 4, "Learn to cook four dishes."),
    ],
    "New York": [
        ("Statue of Liberty", "Sightseeing", 25, 4, "Ferry to Liberty Island."),
        ("Broadway Show", "Entertainment", 150, 3, "An evening on Broadway."),
        ("Central Park Bike Tour", "Adventure", 45, 2, "Cycle through the park."),
    ],
    "Los Angeles": [
        ("Hollywood Studio Tour", "Entertainment", 70, 4, "Behind the scenes of the studios."),
        ("Santa Monica Pier", "Sightseeing", 0, 2, "Boardwalk and sunset."),
        ("Griffith Observatory", "Culture", 0, 2, "Stars and city views."),
    ],
    "Dubai": [
        ("Burj Khalifa At the Top", "Sightseeing", 45, 2, "Observation deck on the 124th floor."),
        ("Desert Safari", "Adventure", 90, 6, "Dune bashing and dinner in the desert."),
        ("Dubai Mall Aquarium", "Entertainment", 35, 2, "Walk-through shark tunnel."),
    ],
    "Sydney": [
        ("Opera House Tour", "Culture", 30, 1, "Inside the sails."),
        ("Bondi to Coogee Walk", "Adventure", 0, 3, "Coastal cliff walk."),
        ("Harbour Bridge Climb", "Adventure", 200, 3, "Climb the coathanger."),
    ],
    "London": [
        ("Tower of London", "Culture", 35, 3, "Crown Jewels and Beefeaters."),
        ("British Museum", "Culture", 0, 3, "World history under one roof."),
        ("West End Musical", "Entertainment", 90, 3, "A night at the theatre."),
    ],
}

DEMO_TRIPS = [
    {
        "name": "Summer in Europe",
        "description": "Exploring the beautiful cities of Europe during summer",
        "start_date": date(2026, 6, 15),
        "end_date": date(2026, 7, 1),
        "budget": 5000,
        "destinations": ["Paris", "Barcelona", "Rome"],
        "status": TripStatus.PLANNED,
    },
    {
        "name": "Asian Adventure",
        "description": "Discovering the cultures and cuisines of Asia",
        "start_date": date(2026, 9, 10),
        "end_date": date(2026, 9, 25),
        "budget": 3500,
        "destinations": ["Tokyo", "Bangkok"],
        "status": TripStatus.PLANNED,
    },
    {
        "name": "USA Road Trip",
        "description": "Cross-country adventure across the United States",
        "start_date": date(2026, 5, 1),
        "end_date": date(2026, 5, 20),
        "budget": 6000,
        "destinations": ["New York", "Los Angeles"],
        "status": TripStatus.CONFIRMED,
    },
    {
        "name": "Middle East Explorer",
        "description": "Luxury experience in Dubai",
        "start_date": date(2026, 12, 1),
        "end_date": date(2026, 12, 10),
        "budget": 8000,
        "destinations": ["Dubai"],
        "status": TripStatus.PLANNED,
    },
    {
        "name": "Down Under",
        "description": "Australia and New Zealand exploration",
        "start_date": date(2026, 3, 15),
        "end_date": date(2026, 4, 5),
        "budget": 7500,
        "destinations": ["Sydney"],
        "status": TripStatus.PLANNED,
    },
]


def seed_catalogue(db: Session) -> int:
    """Insert any missing cities and activities; returns the number of cities added."""
    added = 0
    for name, country, cost_index, popularity, description in CITIES:
        city = db.query(City).filter(City.name == name, City.country == country).first()
        if not city:
            city = City(
                name=name,
                country=country,
                cost_index=cost_index,
                popularity=popularity,
                description=description,
            )
            db.add(city)
            db.flush()
            added += 1

        existing = {a.name for a in db.query(Activity).filter(Activity.city_id == city.id).all()}
        for act_name, category, cost, duration, act_description in ACTIVITIES.get(name, []):
            if act_name in existing:
                continue
            db.add(Activity(
                name=act_name,
                category=category,
                estimated_cost=cost,
                duration=duration,
                description=act_description,
                city_id=city.id,
            ))
    db.commit()
    logger.info(f"Catalogue seeded: {added} new cities")
    return added


def seed_user_trips(
    db: Session,
    email: str,
    name: str = "Demo Traveller",
    password: str = "12345678",
    activities_per_city: int = 3
) -> User:
    """Ensure a demo user exists and give them the sample trips."""
    user = db.query(User).filter(User.email == email.lower()).first()
    if not user:
        user = User(
            email=email.lower(),
            name=name,
            hashed_password=get_password_hash(password),
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
        )
        db.add(user)
        db.flush()
        logger.info(f"Demo user created: {user.email}")

    for trip_data in DEMO_TRIPS:
        trip = Trip(user_id=user.id, is_public=False, **trip_data)
        trip.destinations = list(trip_data["destinations"])
        db.add(trip)
        db.flush()

        for dest_name in trip.destinations:
            city = db.query(City).filter(City.name == dest_name).first()
            if not city:
                continue
            activities = db.query(Activity).filter(
                Activity.city_id == city.id
            ).order_by(Activity.id).limit(activities_per_city).all()
            for activity in activities:
                db.add(TripActivity(
                    trip_id=trip.id,
                    activity_id=activity.id,
                    date=trip.start_date,
                    notes=f"Planned activity in {city.name}",
                ))
        logger.info(f"Demo trip created: {trip.name}")

    db.commit()
    db.refresh(user)
    return user
