"""Sort files into folders by extension or modification date."""