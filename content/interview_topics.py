# interview_topics.py
# Interview preparation topics

INTERVIEW_QUESTIONS = {
    'id': 'interview-questions',
    'title': 'Technical Interview Questions',
    'subtitle': 'Comprehensive Collection of Real Interview Questions',
    'summary': 'Essential technical interview questions covering OOP, databases, networking and operating systems, plus behavioral questions.',
    'analogy': 'Interview preparation is like marathon training: practice different terrains and distances before race day.',
    'key_points': [
        'Explain the concept first, then give an example',
        'Mention trade-offs, not only definitions',
        'Think aloud while solving problems',
    ],
    'questions': [
        {'question': 'What happens when you type a URL into a browser?', 'answer': 'DNS resolution, TCP and TLS handshakes, the HTTP request and response, then parsing and rendering of the page and its sub-resources.'},
        {'question': 'What is the difference between a process and a thread?', 'answer': 'A process has its own address space; threads share the address space of their process and only keep their own stack and registers.'},
        {'question': 'What is a deadlock and how can it be prevented?', 'answer': 'A cycle of processes each waiting for a resource held by the next. It is prevented by breaking one Coffman condition, for example by ordering lock acquisition.'},
    ],
    'behavioral_questions': [
        {'question': 'Tell me about a time you disagreed with a teammate.', 'answer': 'Describe the situation, how you listened and presented evidence, and how the decision was reached, using the STAR format.'},
        {'question': 'Describe a project you are proud of.', 'answer': 'Pick a project with measurable impact, explain your specific contribution and what you would do differently.'},
    ],
}

INTERVIEW_DISCUSSIONS = {
    'id': 'interview-discussions',
    'title': 'Interview Experiences',
    'subtitle': 'How to Use Shared Interview Experiences',
    'summary': 'Reading other candidates experiences shows which topics are asked in practice and how interviews are structured.',
    'key_points': [
        'Focus on recent experiences for the same role and level',
        'Note recurring topics rather than memorizing answers',
        'Share your own experience afterwards to help others',
    ],
    'resources': [
        {'title': 'GeeksforGeeks Interview Experiences', 'url': 'https://www.geeksforgeeks.org/company-interview-corner/', 'description': 'Company-wise interview experiences'},
    ],
}

COMMUNITY_DISCUSSION_LINKS = {
    'id': 'community-discussion-links',
    'title': 'Community Discussion Links',
    'subtitle': 'Online Platforms for Real Interview Experiences',
    'visual_concept': 'A global network of professionals sharing their interview journeys, from preparation strategies to the questions asked.',
    'discussions': [
        {'title': 'LeetCode Discuss - Interview Experience', 'url': 'https://leetcode.com/discuss/interview-experience/', 'description': 'Detailed technical interview experiences from top tech companies'},
        {'title': 'Reddit - r/cscareerquestions', 'url': 'https://www.reddit.com/r/cscareerquestions/', 'description': 'Community sharing interview experiences and career advice'},
        {'title': 'Blind - Professional Network', 'url': 'https://www.teamblind.com/', 'description': 'Anonymous platform for tech professionals sharing interview experiences'},
    ],
}

INTERVIEW_PREP = [INTERVIEW_QUESTIONS, INTERVIEW_DISCUSSIONS, COMMUNITY_DISCUSSION_LINKS]
