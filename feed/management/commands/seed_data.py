user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "name": "John Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "name": "Jane Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "name": "Charlie Johnson"},
]

# RGB backgrounds used for generated post images.
image_palette = [
    (231, 111, 81),
    (244, 162, 97),
    (233, 196, 106),
    (42, 157, 143),
    (38, 70, 83),
    (131, 56, 236),
    (58, 134, 255),
    (255, 0, 110),
]

comment_phrases = [
    "Love this!",
    "Great shot",
    "Where was this taken?",
    "The colours are amazing",
    "So good",
    "This made my day",
    "Wow",
    "Need to go there",
]
