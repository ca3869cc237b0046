QUESTION_COUNT = 5
OPTION_COUNT = 4

_EXAMPLE = """[
  {
    "question": "First question here?",
    "options": [
      { "label": "A", "text": "First option" },
      { "label": "B", "text": "Second option" },
      { "label": "C", "text": "Third option" },
      { "label": "D", "text": "Fourth option" }
    ],
    "correctAnswer": "A",
    "explanation": "Brief explanation of why this answer is correct.",
    "sources": [
      { "title": "Wikipedia - Topic Name", "url": "https://en.wikipedia.org/wiki/Topic_Name" },
      { "title": "Educational Source", "url": "https://example.edu/topic" }
    ]
  },
  {
    "question": "Second question here?",
    "options": [
      { "label": "A", "text": "First option" },
      { "label": "B", "text": "Second option" },
      { "label": "C", "text": "Third option" },
      { "label": "D", "text": "Fourth option" }
    ],
    "correctAnswer": "B",
    "explanation": "Brief explanation of why this answer is correct.",
    "sources": [
      { "title": "Wikipedia - Topic Name", "url": "https://en.wikipedia.org/wiki/Topic_Name" }
    ]
  },
  ... (continue for all 5 questions)
]"""


def build_prompt(topic: str) -> str:
    """
    Prompt asking the model for exactly 5 multiple-choice questions on `topic`,
    returned as a bare JSON array. The topic is interpolated as-is; callers
    trim and reject blank topics before getting here.
    """
    return f"""You are an expert educational content creator. Generate exactly {QUESTION_COUNT} high-quality multiple choice questions based on the following topic: "{topic}"

REQUIREMENTS:
1. Question Quality:
   - Write clear, concise and unambiguous questions
   - Test understanding rather than memorization
   - Use proper grammar and punctuation
   - No trick questions or needlessly complex wording
   - Each question must cover a different aspect of the topic

2. Answer Options:
   - Provide exactly {OPTION_COUNT} options (A, B, C, D) for each question
   - Keep all options plausible and of similar length
   - Exactly ONE option must be definitively correct
   - Do not use options like "All of the above" or "None of the above"
   - Base the wrong answers on common misconceptions

3. Difficulty:
   - Target an intermediate difficulty level
   - Challenging but fair; avoid obscure or overly technical details
   - Vary difficulty slightly across the {QUESTION_COUNT} questions

4. Explanation:
   - Explain briefly why the correct answer is right
   - Keep explanations to 2-3 sentences

5. Sources:
   - Include 1-3 reputable sources supporting the answer and explanation
   - Prefer authoritative sources: Wikipedia, educational institutions, scientific journals, official documentation
   - Every source must have a descriptive title and a valid URL
   - URLs must point to specific, relevant pages

OUTPUT FORMAT (respond ONLY with valid JSON - an array of {QUESTION_COUNT} question objects):
{_EXAMPLE}

Generate all {QUESTION_COUNT} questions now."""
