"""User interface state: hotbar, menu states and splash timing."""