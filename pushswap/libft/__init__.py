"""String, character, memory, linked-list and line-reading helpers."""