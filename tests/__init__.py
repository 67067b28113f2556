# Tests package for ClookBook API
