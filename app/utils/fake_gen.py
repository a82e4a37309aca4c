from faker import Faker
from faker.providers import BaseProvider

class InkwellProvider(BaseProvider):
    """
    Inkwell 演示数据生成器
    """

    topics = [
        'Python', 'Flask', 'Databases', 'Search', 'Design', 'Testing',
        'Deployment', 'Security', 'Performance', 'Writing'
    ]

    title_templates = [
        'A practical guide to {topic}',
        '{topic} in ten minutes',
        'What nobody tells you about {topic}',
        'Notes on {topic}',
        'Getting started with {topic}',
        '{topic}: lessons from production',
    ]

    external_systems = ['wordpress', 'medium', 'ghost', 'rss']

    def tag_names(self):
        return list(self.topics)

    def content_title(self):
        template = self.random_element(self.title_templates)
        return template.format(topic=self.random_element(self.topics))

    def external_source(self):
        """导入内容的来源元数据"""
        system = self.random_element(self.external_systems)
        return {
            'externalSource': system,
            'externalId': self.generator.uuid4(),
            'externalUrl': self.generator.url() + self.generator.slug(),
        }

# 初始化 Faker 并添加自定义 Provider
fake = Faker('en_US')
fake.add_provider(InkwellProvider)
