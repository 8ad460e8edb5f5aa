"""Per-language notification templates.

Events in the notification configuration carry one template per supported
language. This feature turns a template record plus render data into the
message body handed to the publisher.

Example:
    ```python
    configuration = load_configuration_file("conf/notifications.yaml")
    event = configuration.find_event("signup")

    if configuration.contains_language(locale):
        body = TemplateRenderer().render(event.template_for(locale), {"Name": "Ada"})
    ```
"""
