"""User-facing messages shared by several commands."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSON_NOT_IN_ADDRESSBOOK = "Person could not be found in address book"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_WELCOME = "Welcome to your Address Book!"
MESSAGE_GOODBYE = "Good bye!"
