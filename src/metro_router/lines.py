"""Metro line definitions for the default network."""

# Stations in order along each line; the first and last entries are the terminals.
# Shared names are interchanges:
#   East End (blue, black), City Centre (blue, green), Boxing Avenue (blue, red),
#   Green Cross (green, yellow), Morpheus Lane (red, yellow),
#   South Park (green, black), Neo Lane (red, black)
METRO_LINES = {
    "blue": [
        "East End", "Foot Stand", "Football Stadium", "City Centre", "Peter Park",
        "Maximus", "Rocky Street", "Boxers Street", "Boxing Avenue", "West End",
    ],
    "green": [
        "North Park", "Sheldon Street", "Greenland", "City Centre", "Stadium House",
        "Green House", "Green Cross", "South Pole", "South Park",
    ],
    "red": [
        "Matrix Stand", "Keymakers Lane", "Oracle Lane", "Boxing Avenue", "Cypher Lane",
        "Smith Lane", "Morpheus Lane", "Trinity Lane", "Neo Lane",
    ],
    "yellow": [
        "Green Cross", "Orange Street", "Silk Board", "Snake Park", "Morpheus Lane",
        "Little Street", "Cricket Grounds",
    ],
    "black": [
        "East End", "Gotham Street", "Batman Street", "Jokers Street", "Hawkins Street",
        "Da Vinci Lane", "South Park", "Newton Bath Tub", "Einstein Lane", "Neo Lane",
    ],
}
