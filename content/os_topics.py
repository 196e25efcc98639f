# os_topics.py
# Operating Systems topics

PROCESS_VS_THREAD = {
    'id': 'process-vs-thread',
    'title': 'Process vs Thread',
    'subtitle': 'Units of Execution and Their Resources',
    'summary': 'A process is an independent program in execution with its own address space; a thread is a lightweight unit of execution that shares its process resources.',
    'explanation': """Process:
- Own address space, file descriptors and resources
- Context switch is expensive
- Crash is isolated from other processes

Thread:
- Shares code, data and heap with sibling threads
- Has its own stack and registers
- Cheaper to create and switch""",
    'key_points': [
        'Processes are isolated, threads share memory',
        'Inter-thread communication is cheaper than IPC',
        'Shared memory requires synchronization',
    ],
    'questions': [
        {'question': 'What is shared between threads of the same process?', 'answer': 'Code, data segment, heap and open files. Each thread keeps its own stack, registers and program counter.'},
    ],
}

CPU_SCHEDULING = {
    'id': 'cpu-scheduling',
    'title': 'CPU Scheduling',
    'subtitle': 'Choosing Which Ready Process Runs Next',
    'summary': 'CPU scheduling algorithms such as FCFS, SJF, Round Robin and priority scheduling decide the order in which ready processes get the processor.',
    'key_points': [
        'FCFS is simple but suffers from the convoy effect',
        'SJF minimizes average waiting time but needs burst estimates',
        'Round Robin uses a time quantum for fairness',
        'Priority scheduling can starve low priority processes; aging fixes it',
    ],
}

DEADLOCKS = {
    'id': 'deadlocks',
    'title': 'Deadlocks',
    'subtitle': 'Processes Waiting on Each Other Forever',
    'summary': 'A deadlock occurs when a set of processes each hold a resource and wait for a resource held by another process in the set.',
    'analogy': 'Four cars at a four-way stop, each waiting for the car on its right to go first.',
    'explanation': """Necessary Conditions (Coffman):
- Mutual exclusion
- Hold and wait
- No preemption
- Circular wait

Handling Strategies:
Deadlocks can be prevented, avoided (Banker's algorithm), detected and recovered from, or ignored.""",
    'key_points': [
        'All four Coffman conditions must hold for a deadlock',
        'Breaking any one condition prevents deadlock',
        'Resource ordering breaks circular wait',
    ],
}

# Banker's algorithm content ships as a group of related topics
BANKERS_ALGORITHM_TOPICS = [
    {
        'id': 'bankers-algorithm',
        'title': "Banker's Algorithm",
        'subtitle': 'Deadlock Avoidance Through Safe States',
        'summary': "The Banker's algorithm grants a resource request only if the system stays in a safe state afterwards.",
        'key_points': [
            'Need = Max - Allocation',
            'A state is safe if some order lets every process finish',
            'Requires maximum demand to be declared in advance',
        ],
    },
    {
        'id': 'safety-algorithm',
        'title': 'Safety Algorithm',
        'subtitle': "Checking Safe States for the Banker's Algorithm",
        'summary': 'The safety algorithm searches for a sequence in which every process can obtain its remaining need and finish.',
        'code_examples': [
            {
                'title': 'Safety check',
                'language': 'python',
                'code': """def is_safe(available, allocation, need):
    work = list(available)
    finished = [False] * len(allocation)
    progress = True
    while progress:
        progress = False
        for i, done in enumerate(finished):
            if not done and all(n <= w for n, w in zip(need[i], work)):
                work = [w + a for w, a in zip(work, allocation[i])]
                finished[i] = progress = True
    return all(finished)""",
            },
        ],
    },
]

PROCESS_MANAGEMENT = [PROCESS_VS_THREAD, CPU_SCHEDULING]
SYNCHRONIZATION = [DEADLOCKS]
