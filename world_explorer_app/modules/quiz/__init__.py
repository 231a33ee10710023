"""Quiz module: template-driven question generation and quiz sessions."""

module_metadata = {
    'name': 'Quizzes',
    'icon': 'circle-question',
    'category': 'Learning',
    'url_prefix': '/api/quiz',
    'enabled': True
}
