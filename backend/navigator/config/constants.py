# Distance conversion
METERS_PER_KM = 1000
SECONDS_PER_HOUR = 3600

# Mean Earth radius used by the Haversine formula
EARTH_RADIUS_KM = 6371

# Average travel speeds in km/h, keyed by travel mode value
TRAVEL_SPEEDS_KMH = {
    "walking": 5,
    "cycling": 15,
    "driving": 30,  # campus speed
}

# Waypoint list bounds accepted by the optimise endpoint
MIN_WAYPOINTS = 2
MAX_WAYPOINTS = 10

# Walking pace used for turn-by-turn step durations, in m/s
STEP_WALKING_SPEED_MPS = 1.4

# Share of the total distance covered by each synthesised step
STEP_DISTANCE_SHARES = (0.6, 0.3, 0.1)

# Offset in degrees used for near-endpoint step coordinates
STEP_OFFSET_DEGREES = 0.0001

# Campus tour query bounds, in minutes
MIN_TOUR_DURATION = 30
MAX_TOUR_DURATION = 180

VALID_TOUR_INTERESTS = ["academic", "history", "recreation", "dining"]

ASSEMBLY_POINTS = [
    {
        "name": "Main Assembly Point",
        "coordinates": {"latitude": 34.728, "longitude": -79.018},
    },
    {
        "name": "Secondary Assembly Point",
        "coordinates": {"latitude": 34.7275, "longitude": -79.017},
    },
]

EMERGENCY_CONTACTS = [
    {"service": "Campus Police", "phone": "910-521-6235"},
    {"service": "Emergency Services", "phone": "911"},
    {"service": "Campus Safety", "phone": "910-521-6000"},
]

EMERGENCY_INSTRUCTIONS = {
    "fire": [
        "Exit building immediately via nearest safe exit",
        "Do not use elevators",
        "Stay low if smoke is present",
        "Proceed to designated assembly point",
        "Await further instructions from emergency personnel",
    ],
    "medical": [
        "Call 911 if not already done",
        "Proceed to nearest emergency exit",
        "Meet emergency responders at main entrance",
        "Provide clear directions to emergency location",
    ],
    "security": [
        "Move to secure location immediately",
        "Avoid affected area",
        "Follow campus police instructions",
        "Proceed to assembly point when safe",
    ],
    "weather": [
        "Seek immediate shelter in sturdy building",
        "Stay away from windows",
        "Move to lowest floor if tornado warning",
        "Await all-clear signal",
    ],
}

ACCESSIBILITY_WARNINGS = [
    "Route optimized for wheelchair accessibility",
    "Avoiding stairs and steep inclines",
]

CAMPUS_TOURS = [
    {
        "id": "highlights-tour",
        "name": "Campus Highlights Tour",
        "duration": 60,
        "distance": 2.1,
        "description": "Visit the most important landmarks on campus",
        "stops": [
            {
                "id": "1",
                "name": "Chavis Student Center",
                "duration": 10,
                "description": "Heart of student life with dining and activities",
                "coordinates": {"latitude": 34.727, "longitude": -79.0187},
            },
            {
                "id": "2",
                "name": "Mary Livermore Library",
                "duration": 15,
                "description": "Main academic library with extensive resources",
                "coordinates": {"latitude": 34.7265, "longitude": -79.0175},
            },
            {
                "id": "3",
                "name": "The Quad",
                "duration": 10,
                "description": "Historic center of campus",
                "coordinates": {"latitude": 34.7268, "longitude": -79.0182},
            },
            {
                "id": "4",
                "name": "UNCP Performing Arts Center",
                "duration": 15,
                "description": "Cultural hub for performances and events",
                "coordinates": {"latitude": 34.7262, "longitude": -79.0195},
            },
        ],
    },
    {
        "id": "academic-tour",
        "name": "Academic Buildings Tour",
        "duration": 90,
        "distance": 3.2,
        "description": "Explore the academic heart of UNCP",
        "stops": [
            {
                "id": "1",
                "name": "Sampson Hall",
                "duration": 20,
                "description": "Main academic building housing multiple departments",
            },
            {
                "id": "2",
                "name": "Science Building",
                "duration": 25,
                "description": "State-of-the-art laboratories and research facilities",
            },
            {
                "id": "3",
                "name": "Business Administration Building",
                "duration": 20,
                "description": "Modern facilities for business education",
            },
        ],
    },
]
