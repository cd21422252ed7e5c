SAMPLE_PREDICTIONS = {
    "user1": "3:2",
    "user2": "1:0",
    "user3": "2:3",
    "user4": "3:4",
}

SAMPLE_ACTUAL_RESULT = "3:4"
