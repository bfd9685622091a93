"""Small helpers for characters, numbers, output, strings, memory and linked lists."""