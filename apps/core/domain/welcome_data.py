# apps/core/domain/welcome_data.py
# Stałe dla onboardingu i ustawień (listy opcji dla formularzy klienta)

DAYS_OF_WEEK = [
    {'value': 'monday', 'label': 'Monday'},
    {'value': 'tuesday', 'label': 'Tuesday'},
    {'value': 'wednesday', 'label': 'Wednesday'},
    {'value': 'thursday', 'label': 'Thursday'},
    {'value': 'friday', 'label': 'Friday'},
    {'value': 'saturday', 'label': 'Saturday'},
    {'value': 'sunday', 'label': 'Sunday'},
]

# Zegar 12h zaczyna się od 12
HOURS_12 = [{'value': h, 'label': str(h)} for h in [12] + list(range(1, 12))]

MINUTES = [{'value': m, 'label': f"{m:02d}"} for m in (0, 15, 30, 45)]

AM_PM_OPTIONS = [
    {'value': 'AM', 'label': 'AM'},
    {'value': 'PM', 'label': 'PM'},
]

DEFAULT_PERFORMANCE_QUESTIONS = [
    {
        'title': 'What were your key accomplishments?',
        'description': 'Describe the work you delivered and the impact it had on your team or customers.',
    },
    {
        'title': 'What challenges did you face?',
        'description': 'Note the obstacles you ran into and how you handled them.',
    },
    {
        'title': 'How did you collaborate with others?',
        'description': 'Think about the people you helped, learned from or worked closely with.',
    },
    {
        'title': 'What did you learn?',
        'description': 'Capture new skills, knowledge or feedback that helped you grow.',
    },
    {
        'title': 'What are your goals for the next period?',
        'description': 'List what you want to focus on and how you will measure progress.',
    },
]
