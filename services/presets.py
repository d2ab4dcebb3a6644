"""
Starter categories shown to a new user (Puerto Peñasco, Sonora).
"""

from typing import List

from models import Category, Location, TimeRange


def default_categories() -> List[Category]:
    return [
        Category(
            id="cat-1",
            name="Gym",
            activity_duration=60,
            time_range=TimeRange(start="06:00", end="18:00"),
            repetitions=1,
            locations=[
                Location(id="act-1-1", address="Agustín de Iturbide 320, Lagos y Ríos, 83550 Puerto Peñasco, Son."),
                Location(id="act-1-2", address="C. 24 Lazaro Cardenas del Río, Centro, 83550 Puerto Peñasco, Son."),
                Location(id="act-1-3", address="Eduardo Ibarra y oriente, 83557 Puerto Peñasco, Son."),
            ],
        ),
        Category(
            id="cat-2",
            name="Coffee",
            activity_duration=30,
            time_range=TimeRange(start="08:00", end="18:00"),
            repetitions=2,  # Morning and afternoon
            locations=[
                Location(id="act-2-1", address="C. 24 Lazaro Cardenas del Río, Centro, 83550 Puerto Peñasco, Son."),
                Location(id="act-2-2", address="Agustin Melgar y Simon Morua S/N, 83550 Puerto Peñasco, Son."),
                Location(id="act-2-3", address="Blvd. Benito Juárez García 319, Centro, 83550 Puerto Peñasco, Son."),
            ],
        ),
        Category(
            id="cat-3",
            name="Library",
            activity_duration=90,
            time_range=TimeRange(start="09:00", end="17:00"),
            repetitions=1,
            locations=[
                Location(id="act-3-1", address="Boulevard Benito Juárez García, Recinto Portuario, 83554 Puerto Peñasco, Son."),
                Location(id="act-3-2", address="C. Miguel Hidalgo y Costilla 268, Oriente, 83553 Puerto Peñasco, Son."),
            ],
        ),
        Category(
            id="cat-4",
            name="Lunch",
            activity_duration=45,
            time_range=TimeRange(start="11:00", end="15:00"),
            repetitions=1,
            locations=[
                Location(id="act-4-1", address="Av. Constitución S/N, Centro, 83550 Puerto Peñasco, Son."),
                Location(id="act-4-2", address="C. Álvaro Obregón 132, entre Blvd. Bénito Juárez y Blvd. Kino, Centro, 83550 Puerto Peñasco, Son."),
                Location(id="act-4-3", address="Blvd. Benito Juárez García 216 B, El Puerto, 83550 Puerto Peñasco, Son."),
            ],
        ),
        Category(
            id="cat-5",
            name="Park",
            activity_duration=60,
            time_range=TimeRange(start="07:00", end="19:00"),
            repetitions=1,
            locations=[
                Location(id="act-5-1", address="Benito Juárez, 83554 Puerto Peñasco, Sonora"),
                Location(id="act-5-2", address="83550, Adolfo López Mateos SN-S PARQUE, Centro, Puerto Peñasco, Son."),
                Location(id="act-5-3", address="León de la Barrera 412-419, Josefa Ortíz de Dominguéz, 83553 Puerto Peñasco, Son."),
            ],
        ),
    ]
