"""Small helpers for characters, memory, strings, linked lists and output."""