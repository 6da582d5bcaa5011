# Fixed JavaScript basics question set.
# correctAnswer.id is the 1-based position of the correct option in "answers";
# correctAnswer.answer repeats that option's text (checked by tools/check_question_catalog.py).

QUESTIONS = [
    {
        "question": "What is the correct way to declare a variable in JavaScript?",
        "answers": ["var x", "variable x", 'let x = "value"', "v x"],
        "correctAnswer": {"id": 3, "answer": 'let x = "value"'},
    },
    {
        "question": "Which method is used to add elements to the end of an array?",
        "answers": ["push()", "append()", "add()", "insert()"],
        "correctAnswer": {"id": 1, "answer": "push()"},
    },
    {
        "question": "What is the output of typeof null in JavaScript?",
        "answers": ["null", "object", "undefined", "number"],
        "correctAnswer": {"id": 2, "answer": "object"},
    },
    {
        "question": "Which operator is used for strict equality comparison in JavaScript?",
        "answers": ["===", "==", "=", "!="],
        "correctAnswer": {"id": 1, "answer": "==="},
    },
    {
        "question": "What is the correct way to write a function in JavaScript?",
        "answers": [
            "func myFunction()",
            "#function myFunction()",
            "function myFunction()",
            "function:myFunction()",
        ],
        "correctAnswer": {"id": 3, "answer": "function myFunction()"},
    },
]
