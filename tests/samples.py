"""Shared sample text for the formatter tests."""

NL = "\r\n"
DS = NL + NL

LIPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut "
    "labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris "
    "nisi ut aliquip ex ea commodo consequat. Duis aute irure dolor in reprehenderit in voluptate velit "
    "esse cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non proident, sunt "
    "in culpa qui officia deserunt mollit anim id est laborum."
)

PHRASE = (
    "Firefighters are working to get a handle on several wildfires that sparked during a lightning "
    "storm on Thursday night. Strong winds and poor visibility created challenges for firefighters "
    "working the blazes on Saturday ..."
)
