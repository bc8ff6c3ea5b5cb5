"""
Recipe Document Markers

Section markers and separators of the plain-text recipe format.
"""

# Paragraphs (title, image, introduction, steps) end at a blank line
SECTION_SEPARATOR = '\n\n'
LINE_SEPARATOR = '\n'

IMAGE_MARKER = 'image:'
INGREDIENTS_MARKER = '---ingredients'
STEPS_MARKER = '---steps'

RECIPE_EXTENSION = '.txt'
