# oop_topics.py
# Object-Oriented Programming topics

ENCAPSULATION = {
    'id': 'encapsulation',
    'title': 'Encapsulation',
    'subtitle': 'Bundling Data and Methods Together with Access Control',
    'summary': 'Encapsulation is the practice of bundling data and methods together in a single unit while restricting direct access to internal components. It provides data hiding and controlled access through public interfaces.',
    'analogy': 'Imagine a bank vault: you cannot touch the money inside directly. You go through the teller (public methods) who validates your identity and processes the request, while the vault internals stay hidden.',
    'explanation': """Encapsulation is one of the four fundamental pillars of Object-Oriented Programming.

THE THREE CORE CONCEPTS:
- Bundling: keeping related data and methods together in one class
- Hiding: making internal details private so they cannot be accessed directly
- Controlling: providing public methods to safely interact with private data

WHY IS IT IMPORTANT?
Encapsulation protects sensitive data, lets the internal representation change without breaking callers, and gives a single place to validate every modification.""",
    'key_points': [
        'Bundle related data and methods together in a single class',
        'Make data private to protect it from direct external access',
        'Provide public getter/setter methods for controlled access',
        'Add validation logic in methods before modifying data',
        'Change implementation without breaking external code',
    ],
    'code_examples': [
        {
            'title': 'Bank Account',
            'language': 'java',
            'description': 'Private state with validated public operations.',
            'code': """public class BankAccount {
    private double balance;

    public void deposit(double amount) {
        if (amount <= 0) throw new IllegalArgumentException("Amount must be positive");
        balance += amount;
    }

    public double getBalance() {
        return balance;
    }
}""",
        },
    ],
    'resources': [
        {'title': 'Oracle Java Tutorials: Controlling Access', 'url': 'https://docs.oracle.com/javase/tutorial/java/javaOO/accesscontrol.html', 'description': 'Access modifiers and member visibility'},
    ],
    'questions': [
        {'question': 'What is encapsulation?', 'answer': 'Bundling data with the methods that operate on it and restricting direct access to that data, exposing a controlled public interface instead.'},
        {'question': 'How is encapsulation different from abstraction?', 'answer': 'Abstraction hides complexity by exposing only what an object does; encapsulation hides state by controlling how it is accessed and modified.'},
    ],
}

INHERITANCE = {
    'id': 'inheritance',
    'title': 'Inheritance',
    'subtitle': 'Reusing and Extending Behaviour Through Class Hierarchies',
    'summary': 'Inheritance lets a class acquire the fields and methods of another class, modelling an "is-a" relationship and enabling code reuse.',
    'analogy': 'A child inherits traits from parents but can also develop unique skills of their own.',
    'explanation': """Inheritance creates a parent-child relationship between classes.

Types of Inheritance:
- Single: one class extends one parent
- Multilevel: a chain of parents
- Hierarchical: several children share one parent
- Multiple: one class extends several parents (through interfaces in Java)""",
    'key_points': [
        'Models an is-a relationship',
        'Subclasses can override inherited methods',
        'Constructors are not inherited',
        'Prefer composition when the relationship is has-a',
    ],
    'questions': [
        {'question': 'Why does Java not support multiple inheritance of classes?', 'answer': 'To avoid the diamond problem, where two parents provide conflicting implementations of the same method.'},
    ],
}

POLYMORPHISM = {
    'id': 'polymorphism',
    'title': 'Polymorphism',
    'subtitle': 'One Interface, Many Implementations',
    'summary': 'Polymorphism allows objects of different classes to be treated through a common interface, with the concrete behaviour chosen at compile time (overloading) or runtime (overriding).',
    'key_points': [
        'Compile-time polymorphism: method overloading',
        'Runtime polymorphism: method overriding with dynamic dispatch',
        'Enables open/closed designs',
    ],
    'questions': [
        {'question': 'What is dynamic method dispatch?', 'answer': 'The mechanism by which a call to an overridden method is resolved at runtime based on the actual object type.'},
    ],
}

ABSTRACTION = {
    'id': 'abstraction',
    'title': 'Abstraction',
    'subtitle': 'Hiding Complexity Behind Simple Interfaces',
    'summary': 'Abstraction exposes only the essential behaviour of an object and hides implementation details, using abstract classes and interfaces.',
    'analogy': 'Driving a car requires the steering wheel and pedals, not knowledge of the engine internals.',
    'key_points': [
        'Focus on what an object does, not how',
        'Achieved with abstract classes and interfaces',
        'Reduces coupling between components',
    ],
}

SINGLETON_PATTERN = {
    'id': 'singleton-pattern',
    'title': 'Singleton Pattern',
    'subtitle': 'Exactly One Instance, Globally Accessible',
    'summary': 'The singleton pattern restricts a class to a single instance and provides a global access point to it.',
    'key_points': [
        'Private constructor prevents outside instantiation',
        'Lazy initialization must be thread-safe',
        'Often considered an anti-pattern because it hides dependencies',
    ],
    'code_examples': [
        {
            'title': 'Thread-safe lazy singleton',
            'language': 'java',
            'code': """public final class Registry {
    private static volatile Registry instance;
    private Registry() {}

    public static Registry getInstance() {
        if (instance == null) {
            synchronized (Registry.class) {
                if (instance == null) instance = new Registry();
            }
        }
        return instance;
    }
}""",
        },
    ],
}

CORE_CONCEPTS = [ENCAPSULATION, INHERITANCE, POLYMORPHISM, ABSTRACTION]
DESIGN_PATTERNS = [SINGLETON_PATTERN]
