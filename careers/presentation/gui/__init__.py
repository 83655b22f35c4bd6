# Flet GUI
