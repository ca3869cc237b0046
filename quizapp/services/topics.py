import random
from typing import Optional

# Quick-start topics across science, history, technology, geography,
# arts & culture, sports and general knowledge.
RANDOM_TOPICS: tuple[str, ...] = (
    # Science
    "Photosynthesis", "Newton's Laws of Motion", "DNA and Genetics", "The Solar System",
    "Chemical Reactions", "Theory of Evolution", "Quantum Mechanics Basics", "Human Anatomy",
    "Climate Change", "Electricity and Magnetism",
    # History
    "World War II", "Ancient Rome", "The Renaissance", "American Revolution",
    "Industrial Revolution", "Ancient Egypt", "The Cold War", "Medieval Europe",
    "The French Revolution", "Ancient Greek Civilization",
    # Technology
    "JavaScript Promises", "Machine Learning Fundamentals", "Cloud Computing",
    "Cybersecurity Basics", "Blockchain Technology", "Artificial Intelligence",
    "Internet of Things", "Web Development", "Database Management",
    "Programming Languages History",
    # Geography
    "Geography of Asia", "African Continent", "European Capitals",
    "Mountain Ranges of the World", "Ocean Currents", "Climate Zones", "Major Rivers",
    "Island Nations",
    # Arts & Culture
    "Classical Music Composers", "Renaissance Art", "Film History", "World Literature",
    "Modern Art Movements", "Musical Instruments", "Theater History", "Photography Basics",
    # Sports & Games
    "Olympic Games History", "Soccer World Cup", "Basketball Rules", "Chess Strategies",
    "Tennis Grand Slams", "Track and Field Events",
    # General Knowledge
    "Nobel Prize Winners", "World Religions", "Famous Inventors", "Mythology and Legends",
    "Space Exploration", "Endangered Species",
)

def random_topic(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(RANDOM_TOPICS)
