"""
Template library: Chakra UI v3 naming rules and the reference LoginCard.

Every answer the server gives goes through with_header() so the model on the
other side always has the v3 renames in context.
"""

GUIDE_TITLE = "# Chakra UI v3 API for GDS"

CHAKRA_V3_GUIDE = """
--- GDS: Chakra UI v3 only (use these names or you get "doesn't provide an export named X") ---
Applies to ALL GDS UI: dashboard, inbox, content page, form, card, layout, settings, list, table, modal, tabs, etc. When the user asks for ANY screen or component with GDS, use ONLY the v3 names below.
Do NOT use: Divider → use Separator
Do NOT use: FormControl, FormLabel, FormHelperText, FormErrorMessage → use Field.Root, Field.Label, Field.HelperText, Field.ErrorText
Do NOT use: Card, CardHeader, CardBody, CardFooter → use Card.Root, Card.Header, Card.Body, Card.Footer (and Card.Title, Card.Description)
Do NOT use: Checkbox (flat) → use Checkbox.Root, Checkbox.HiddenInput, Checkbox.Control, Checkbox.Indicator, Checkbox.Label
Do NOT use: InputRightElement, InputLeftElement → use InputGroup with endElement or startElement prop (node, not a component)
Do NOT use: Table, Thead, Tbody, Tr, Th, Td, TableContainer → use Table.Root, Table.Header, Table.Body, Table.Row, Table.ColumnHeader, Table.Cell, Table.ScrollArea (use textAlign="end" not isNumeric)
Do NOT use: Modal, ModalOverlay, ModalContent, ModalHeader, ModalBody, ModalFooter, ModalCloseButton → use Dialog.Root, Dialog.Backdrop, Dialog.Positioner, Dialog.Content, Dialog.Header, Dialog.Title, Dialog.Body, Dialog.Footer, Dialog.CloseTrigger
Do NOT use: colorScheme → use colorPalette
Do NOT use: leftIcon/rightIcon on Button → put icon as child: <Button><CheckIcon /> Label</Button>
Do NOT use: Collapse → use Collapsible.Root, Collapsible.Content (prop open not in)
Do NOT use: Select → use NativeSelect.Root, NativeSelect.Field, NativeSelect.Indicator
Do NOT use: Alert, AlertIcon, AlertTitle, AlertDescription → use Alert.Root, Alert.Indicator, Alert.Content, Alert.Title, Alert.Description
Do NOT use: Tab, TabList, TabPanel, TabPanels → use Tabs.Trigger, Tabs.List, Tabs.Content (value; no TabPanels)
Do NOT use: AccordionButton, AccordionIcon → use Accordion.Trigger, Accordion.ItemIndicator
Do NOT use: Avatar (flat) → use Avatar.Root, Avatar.Image, Avatar.Fallback
Do NOT use: CircularProgress → use ProgressCircle.Root, ProgressCircle.Circle, ProgressCircle.Track, ProgressCircle.Range
When writing ANY GDS/Chakra code (dashboard, inbox, content page, form, card, layout, etc.), use ONLY the v3 names above.
---"""

SECTION_SEPARATOR = "\n\n"

_LOGIN_CARD_SNIPPET = """import * as React from "react";
import {
  Box,
  Button,
  Card,
  Checkbox,
  Field,
  Heading,
  IconButton,
  Input,
  InputGroup,
  Link,
  Separator,
  Stack,
  Text,
} from "@chakra-ui/react";

export function LoginCard() {
  const [showPassword, setShowPassword] = React.useState(false);
  const [emailError, setEmailError] = React.useState("");
  const [passwordError, setPasswordError] = React.useState("");

  const handleSubmit = (e: React.FormEvent) => {
    e.preventDefault();
    setEmailError("");
    setPasswordError("");
    // Add validation and submit
  };

  return (
    <Card.Root maxW="md" mx="auto">
      <Card.Header>
        <Card.Title asChild>
          <Heading size="lg" color="fg">Sign in</Heading>
        </Card.Title>
        <Text color="fg.muted" mt="1">Use your email and password</Text>
      </Card.Header>
      <Separator />
      <Card.Body>
        <form onSubmit={handleSubmit}>
          <Stack gap="4">
            <Field.Root invalid={!!emailError}>
              <Field.Label>Email</Field.Label>
              <Input type="email" placeholder="you@example.com" />
              <Field.ErrorText>{emailError}</Field.ErrorText>
            </Field.Root>

            <Field.Root invalid={!!passwordError}>
              <Field.Label>Password</Field.Label>
              <InputGroup
                endElement={
                  <IconButton
                    type="button"
                    aria-label={showPassword ? "Hide password" : "Show password"}
                    variant="ghost"
                    size="sm"
                    onClick={() => setShowPassword((p) => !p)}
                  >
                    {showPassword ? "Hide" : "Show"}
                  </IconButton>
                }
              >
                <Input
                  type={showPassword ? "text" : "password"}
                  placeholder="Password"
                />
              </InputGroup>
              <Field.ErrorText>{passwordError}</Field.ErrorText>
            </Field.Root>

            <Checkbox.Root>
              <Checkbox.HiddenInput />
              <Checkbox.Control />
              <Checkbox.Label>Remember me</Checkbox.Label>
            </Checkbox.Root>

            <Button type="submit" colorPalette="brand" width="full">
              Sign in
            </Button>
          </Stack>
        </form>
      </Card.Body>
      <Separator />
      <Card.Footer>
        <Link href="#" color="fg.muted" textStyle="sm">
          Forgot password?
        </Link>
      </Card.Footer>
    </Card.Root>
  );
}
"""


def login_card_snippet() -> str:
    """Production-ready LoginCard using only v3 names (Separator, Field.*, Card.*, Checkbox.Root, InputGroup endElement)."""
    return _LOGIN_CARD_SNIPPET


def guide_text() -> str:
    """The full reference as returned by the guide tool and GET /mcp/guide."""
    return GUIDE_TITLE + CHAKRA_V3_GUIDE


def with_header(body: str) -> str:
    """Prepend the v3 naming rules so every answer carries the same preamble."""
    return CHAKRA_V3_GUIDE.strip() + SECTION_SEPARATOR + body
