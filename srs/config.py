DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
RELEARN_INTERVAL_DAYS = 1   # "Again" sends the card back one day
SECOND_INTERVAL_DAYS = 6
FIRST_INTERVAL = {
    2: 1,              # Hard: 1 day
    3: 1,              # Good: 1 day
    4: 4,              # Easy: 4 days
}
HARD_GROWTH = 1.2
EASY_BONUS = 1.3
EASE_DELTA = {
    1: -0.20,          # Again
    2: -0.15,          # Hard
    3: 0.0,            # Good
    4: 0.15,           # Easy
}
DEFAULT_DAILY_GOAL = 20
