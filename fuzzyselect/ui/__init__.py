"""Qt integration for fuzzyselect"""
