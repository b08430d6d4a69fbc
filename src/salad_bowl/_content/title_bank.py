# Area: Content
"""
salad_bowl._content.title_bank — Built-in title bank
====================================================

Curated titles for the offline title source. Each entry is
(text, categories, difficulty) with difficulty 1 (everyone knows it)
to 5 (obscure).
"""

from typing import List, Tuple

from ..models import Card, Category

M, MU, S, I, E, F, SP, H, P, PE = (
    Category.MOVIES,
    Category.MUSIC,
    Category.SCIENCE,
    Category.INTERNET,
    Category.EVERYDAY,
    Category.FOOD,
    Category.SPORTS,
    Category.HISTORY,
    Category.PLACES,
    Category.PEOPLE,
)

TITLE_ENTRIES: List[Tuple[str, Tuple[Category, ...], int]] = [
    # Movies & TV
    ("The Office", (M,), 1),
    ("Stranger Things", (M,), 1),
    ("Squid Game", (M, I), 1),
    ("Studio Ghibli", (M,), 2),
    ("Binge watching until 3 AM", (M, E), 1),
    ("The series finale disappointment", (M,), 2),
    ("The intro you never skip", (M, MU), 1),
    ("When the subtitles spoil the joke", (M,), 2),
    ("Jurassic Park", (M, S), 1),
    ("The Wizard of Oz", (M,), 1),
    ("Breaking Bad", (M,), 2),
    ("A Nightmare on Elm Street", (M,), 3),
    # Music
    ("Bohemian Rhapsody", (MU,), 1),
    ("Karaoke night", (MU, E), 1),
    ("The song stuck in your head", (MU, E), 1),
    ("Air guitar solo", (MU,), 1),
    ("Elevator music", (MU, E), 2),
    ("The Beatles", (MU, PE), 1),
    ("Vinyl record collection", (MU,), 2),
    ("Mozart", (MU, PE, H), 2),
    ("Auto-Tune", (MU, S), 3),
    ("The Eurovision Song Contest", (MU, P), 3),
    # Science
    ("Powerhouse of the cell", (S,), 1),
    ("Honey never spoils", (S, F), 2),
    ("Why cats purr", (S, E), 2),
    ("Static shock in winter", (S, E), 1),
    ("Contagious yawning", (S,), 3),
    ("Black hole", (S,), 1),
    ("The periodic table", (S,), 1),
    ("Photosynthesis", (S,), 2),
    ("Schrodinger's cat", (S, PE), 3),
    ("Bananas are berries", (S, F), 4),
    ("Plate tectonics", (S, P), 4),
    # Internet culture
    ("This is fine", (I,), 1),
    ("Rickrolling", (I, MU), 1),
    ("Buffering at the worst moment", (I, E), 1),
    ("Cookie consent pop-ups", (I,), 2),
    ("The blue screen of death", (I,), 2),
    ("Typing in all caps", (I,), 1),
    ("Autocorrect fails", (I, E), 1),
    ("The comment section rabbit hole", (I,), 2),
    ("Loading bar stuck at 99 percent", (I,), 2),
    ("The password reset loop", (I, E), 2),
    ("Distracted boyfriend meme", (I,), 3),
    # Everyday things
    ("The perfect parking spot", (E,), 1),
    ("Finding money in old pants", (E,), 1),
    ("The snooze button", (E,), 1),
    ("Walking into a spider web", (E,), 1),
    ("The drawer that always sticks", (E,), 2),
    ("Stepping on a Lego", (E,), 1),
    ("The charging cable that only works upside down", (E, S), 1),
    ("Small talk in the elevator", (E,), 2),
    ("Tangled headphones", (E, MU), 1),
    ("The sock that disappears in the dryer", (E,), 2),
    # Food & drink
    ("Pineapple on pizza", (F,), 1),
    ("Brain freeze", (F, S), 1),
    ("Sourdough starter", (F,), 2),
    ("The last slice of cake", (F, E), 1),
    ("Fortune cookie", (F,), 1),
    ("Avocado toast", (F, I), 1),
    ("Crème brûlée", (F,), 3),
    ("Cold brew coffee", (F,), 2),
    ("Kimchi", (F, P), 3),
    # Sports
    ("Penalty shootout", (SP,), 1),
    ("The wave at a stadium", (SP, E), 1),
    ("Hole in one", (SP,), 1),
    ("Photo finish", (SP,), 2),
    ("Tour de France", (SP, P), 2),
    ("Slam dunk", (SP,), 1),
    ("Sumo wrestling", (SP, P), 2),
    ("The offside rule", (SP,), 3),
    ("Curling", (SP,), 3),
    # History
    ("The Moon landing", (H, S), 1),
    ("The fall of the Berlin Wall", (H, P), 2),
    ("Cleopatra", (H, PE), 1),
    ("The Trojan Horse", (H,), 2),
    ("The printing press", (H, S), 3),
    ("The Boston Tea Party", (H, F), 3),
    ("The Great Fire of London", (H, P), 4),
    ("Napoleon", (H, PE), 1),
    # Places
    ("The Eiffel Tower", (P,), 1),
    ("The Great Wall of China", (P, H), 1),
    ("Mount Everest", (P,), 1),
    ("The Bermuda Triangle", (P,), 2),
    ("Times Square", (P,), 1),
    ("Machu Picchu", (P, H), 3),
    ("The Dead Sea", (P, S), 3),
    ("Stonehenge", (P, H), 2),
    # People
    ("Albert Einstein", (PE, S), 1),
    ("Shakespeare", (PE, H), 1),
    ("Frida Kahlo", (PE,), 3),
    ("Leonardo da Vinci", (PE, H), 2),
    ("Marie Curie", (PE, S), 3),
    ("Serena Williams", (PE, SP), 2),
    ("Bob Ross", (PE, I), 2),
    ("Houdini", (PE, H), 3),
]


def bank_cards() -> List[Card]:
    """Build a fresh Card for every bank entry."""
    return [
        Card(text=text, category_tags=frozenset(categories), difficulty=difficulty)
        for text, categories, difficulty in TITLE_ENTRIES
    ]
