"""
Description:
Static tables used when the generative model cannot be used.

FALLBACK_QUESTIONS is searched in insertion order and the first matching category
wins, so the order of the keys below is part of the selector's behaviour. "default"
must stay last.

RESUME_SUGGESTIONS is returned unchanged for every resume scored by the fallback.
"""

FALLBACK_QUESTIONS = {
    'software developer': (
        'Tell me about yourself and your programming background.',
        'Describe a challenging technical problem you solved recently.',
        'How do you stay updated with new technologies and programming trends?',
        'Explain your approach to debugging a complex issue.',
        'What programming languages and frameworks are you most comfortable with?',
    ),
    'data scientist': (
        'Tell me about your experience with data analysis and machine learning.',
        'Describe a data science project you worked on from start to finish.',
        'How do you handle missing or inconsistent data in your datasets?',
        'What statistical methods do you use most frequently in your work?',
        'How do you communicate complex data insights to non-technical stakeholders?',
    ),
    'marketing manager': (
        'Tell me about your marketing experience and key achievements.',
        'How do you develop and execute a marketing strategy?',
        'Describe a successful marketing campaign you led.',
        'How do you measure the effectiveness of marketing campaigns?',
        'What digital marketing tools and platforms do you use?',
    ),
    'default': (
        'Tell me about yourself and your professional background.',
        'What are your greatest strengths and how do they apply to this role?',
        'Describe a challenging situation at work and how you handled it.',
        'Where do you see yourself in 5 years?',
        'Why are you interested in this position and our company?',
    ),
}

DEFAULT_CATEGORY = 'default'

RESUME_SUGGESTIONS = (
    "Add more relevant keywords for your target role",
    "Use bullet points to improve readability",
    "Include quantifiable achievements with numbers",
    "Add a professional summary section",
    "Ensure contact information is clearly visible",
    "Use standard section headings (Experience, Education, Skills)",
    "Include relevant technical skills for your field",
)
