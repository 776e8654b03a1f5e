"""Start, game over and victory screens, buttons, and the coin counter."""