"""Temperature, length and weight unit conversion, from the command line or prompts."""